"""imageslots -- three-slot PNG upload server with a script trigger.

Serves an HTML form for uploading up to three PNG images, each stored
under a fixed filename, renders the current images back into the page,
and runs a fixed shell script on request.
"""

__version__ = "0.1.0"

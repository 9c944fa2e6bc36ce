"""HTTP server module for imageslots.

Renders the upload form, accepts slot uploads, serves the stored images
and triggers the configured script.
"""

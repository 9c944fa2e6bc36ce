"""Upload validation for imageslots.

Size bounding, slot selection, filename extension checks and
content-based MIME sniffing for incoming image uploads.
"""

from imageslots.upload.sniff import detect_content_type
from imageslots.upload.validate import UploadRejected, parse_slot, validate_upload

__all__ = ["UploadRejected", "detect_content_type", "parse_slot", "validate_upload"]

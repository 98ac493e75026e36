"""Attachment staging, content-type lookup and the media façade."""

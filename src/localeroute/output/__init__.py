"""Output — Rich rendering and JSON formatting of ServiceResult."""

"""Service layer — ServiceResult-returning operations over the normalizer."""

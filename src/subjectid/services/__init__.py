"""Service layer: operations over subject identifiers returning ServiceResult."""

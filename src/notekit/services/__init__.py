"""Service layer: the engine behind a ServiceResult contract."""

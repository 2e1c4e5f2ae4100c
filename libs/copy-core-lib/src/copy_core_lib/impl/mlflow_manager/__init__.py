"""MLflow prompt and model management."""

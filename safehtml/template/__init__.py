"""Parser-context and error types for contextually sanitized HTML templates."""
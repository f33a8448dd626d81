"""Provider-neutral building blocks: models, inputs, errors, call context."""

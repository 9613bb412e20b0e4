"""Session output, prompts and broadcast helpers."""

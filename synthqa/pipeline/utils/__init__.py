from .passages import extract_passages, strip_prompt_header

__all__ = ["extract_passages", "strip_prompt_header"]

"""
Domain models for the editor.

    from codehike_editor.core.models import EditorConfig, Outcome, InjectionReport
"""

from codehike_editor.core.models.config import EditorConfig
from codehike_editor.core.models.injection import (
    HandlerDescriptor,
    InjectionReport,
    InlineHandlerDescriptor,
    MdxComponentDescriptor,
    MutationResult,
    Outcome,
    WrapperDescriptor,
)

__all__ = [
    # config.py
    "EditorConfig",
    # injection.py
    "HandlerDescriptor",
    "InjectionReport",
    "InlineHandlerDescriptor",
    "MdxComponentDescriptor",
    "MutationResult",
    "Outcome",
    "WrapperDescriptor",
]

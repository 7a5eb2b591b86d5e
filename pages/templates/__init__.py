"""
Configuration-driven UI templates.

A template pairs a declarative configuration (selectors, fields, optional
hooks) with generic behavior for a recurring UI pattern:
- FormTemplate: fill, submit, validate and reset forms
- ListTemplate: enumerate, search, sort and paginate item collections
- ModalTemplate: open/close lifecycle of dialogs

Templates are obtained by name through TemplateFactory, or per test
through TemplateManager which caches one instance per template.
"""

from pages.templates.base_template import BaseTemplate, TemplateConfig, TemplateHook
from pages.templates.errors import (
    ConfigurationError,
    FeatureNotConfiguredError,
    FieldNotConfiguredError,
    IndexOutOfRangeError,
    ItemNotFoundError,
    MissingRequiredFieldError,
    NotFoundError,
    TemplateError,
    TemplateNotFoundError,
)
from pages.templates.form_template import FieldType, FormField, FormTemplate, FormTemplateConfig
from pages.templates.list_template import ListTemplate, ListTemplateConfig
from pages.templates.modal_template import ModalTemplate, ModalTemplateConfig
from pages.templates.template_factory import (
    TemplateFactory,
    TemplateManager,
    TemplateRegistry,
    TemplateType,
    build_default_registry,
)

__all__ = [
    "BaseTemplate",
    "ConfigurationError",
    "FeatureNotConfiguredError",
    "FieldNotConfiguredError",
    "FieldType",
    "FormField",
    "FormTemplate",
    "FormTemplateConfig",
    "IndexOutOfRangeError",
    "ItemNotFoundError",
    "ListTemplate",
    "ListTemplateConfig",
    "MissingRequiredFieldError",
    "ModalTemplate",
    "ModalTemplateConfig",
    "NotFoundError",
    "TemplateConfig",
    "TemplateError",
    "TemplateFactory",
    "TemplateHook",
    "TemplateManager",
    "TemplateNotFoundError",
    "TemplateRegistry",
    "TemplateType",
    "build_default_registry",
]

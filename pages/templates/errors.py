"""Exceptions raised by the UI template layer."""

from __future__ import annotations


class TemplateError(Exception):
    """Base class for every template-layer error."""


class ConfigurationError(TemplateError):
    """A selector, feature or hook was not declared in the template configuration."""


class FeatureNotConfiguredError(ConfigurationError):
    """An optional list feature (search, sort, load more) has no selector configured."""

    def __init__(self, feature: str, template_name: str):
        self.feature = feature
        self.template_name = template_name
        super().__init__(
            f"{feature.capitalize()} functionality not configured for template '{template_name}'"
        )


class FieldNotConfiguredError(ConfigurationError):
    """A list item field was requested that is absent from ``item_fields``."""

    def __init__(self, field_name: str, template_name: str):
        self.field_name = field_name
        self.template_name = template_name
        super().__init__(f"Field '{field_name}' not configured in template '{template_name}'")


class NotFoundError(TemplateError, LookupError):
    """A named element, action or validation does not exist."""


class TemplateNotFoundError(NotFoundError):
    """A template name is missing from the registry."""

    def __init__(self, template_type: str, name: str, available: list[str]):
        self.template_type = template_type
        self.name = name
        self.available = available
        super().__init__(
            f"{template_type.capitalize()} template '{name}' not found. "
            f"Available templates: {', '.join(available) or '(none)'}"
        )


class ItemNotFoundError(NotFoundError):
    """No list item matched a field lookup."""

    def __init__(self, field_name: str, value: str):
        self.field_name = field_name
        self.value = value
        super().__init__(f"Cannot click item - not found with {field_name}: {value}")


class IndexOutOfRangeError(TemplateError, IndexError):
    """A list item index is outside the current item count."""

    def __init__(self, index: int, count: int):
        self.index = index
        self.count = count
        super().__init__(f"Item index {index} out of range. Only {count} items available.")


class MissingRequiredFieldError(TemplateError, ValueError):
    """Form data lacks a value for a required field."""

    def __init__(self, field_name: str, template_name: str):
        self.field_name = field_name
        self.template_name = template_name
        super().__init__(
            f"Required field '{field_name}' is missing in form data for template '{template_name}'"
        )

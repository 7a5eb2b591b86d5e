"""
Reusable form template.

Fills, submits, validates and resets data-entry forms described by a
list of field descriptors. Fields are always processed in declaration
order so that dependent controls (for example a state input that only
appears after a country is chosen) are driven deterministically.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from re import Pattern
from typing import Any, Literal

from playwright.sync_api import Locator, Page

from pages.templates.base_template import BaseTemplate, TemplateConfig
from pages.templates.errors import ConfigurationError, MissingRequiredFieldError

logger = logging.getLogger(__name__)

FormOutcome = Literal["success", "error"]


class FieldType(str, Enum):
    """Enumeration of supported form control types."""

    INPUT = "input"
    SELECT = "select"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    TEXTAREA = "textarea"


@dataclass(kw_only=True)
class FormField:
    """
    One form control.

    Attributes:
        name: Key used to read the value from caller-supplied data.
        selector: Selector of the control (the radio group for radios).
        type: Control type, drives the fill strategy.
        required: Whether fill_form() demands a value.
        validation: Optional pattern documenting the accepted format.
    """

    name: str
    selector: str
    type: FieldType = FieldType.INPUT
    required: bool = False
    validation: Pattern[str] | str | None = None

    def __post_init__(self) -> None:
        try:
            self.type = FieldType(self.type)
        except ValueError:
            allowed = ", ".join(t.value for t in FieldType)
            raise ConfigurationError(
                f"Field '{self.name}' has unknown type '{self.type}' (expected one of: {allowed})"
            ) from None


@dataclass(kw_only=True)
class FormTemplateConfig(TemplateConfig):
    fields: list[FormField]
    submit_button: str
    reset_button: str | None = None
    error_container: str | None = None
    success_container: str | None = None

    def __post_init__(self) -> None:
        super().__post_init__()
        seen: set[str] = set()
        for form_field in self.fields:
            if form_field.name in seen:
                raise ConfigurationError(
                    f"Duplicate field '{form_field.name}' in form template '{self.template_name}'"
                )
            seen.add(form_field.name)


def _quote_attribute(value: Any) -> str:
    text = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{text}"'


def _has_value(value: Any) -> bool:
    return value is not None and value != ""


class FormTemplate(BaseTemplate):
    """Declarative fill/submit/validate/reset workflow over a field list."""

    config: FormTemplateConfig

    def __init__(self, page: Page, config: FormTemplateConfig):
        super().__init__(page, config)

    # -------------------------------------------------------------------------
    # Filling
    # -------------------------------------------------------------------------

    def fill_form(self, form_data: Mapping[str, Any]) -> None:
        """
        Fill every declared field that has a value in ``form_data``.

        Args:
            form_data: Field name to value. Keys that are not declared
                fields are ignored.

        Raises:
            MissingRequiredFieldError: If a required field has no value
                (missing, None or empty string).
        """
        start = time.perf_counter()
        logger.info(f"Filling form: {self.template_name}")
        self.take_template_screenshot("before-fill")

        for form_field in self.config.fields:
            value = form_data.get(form_field.name)
            if _has_value(value):
                self.fill_field(form_field, value)
            elif form_field.required:
                raise MissingRequiredFieldError(form_field.name, self.template_name)

        self.take_template_screenshot("after-fill")
        logger.info(f"Form filled in {(time.perf_counter() - start) * 1000:.2f}ms")

    def fill_field(self, form_field: FormField, value: Any) -> None:
        """
        Write one value using the strategy for the field's type.

        Checkboxes are checked or unchecked by truthiness; radios target
        the option whose value attribute equals ``value``.
        """
        if form_field.type is FieldType.RADIO:
            element = self.page.locator(f"{form_field.selector}[value={_quote_attribute(value)}]")
            self.wait_for_element(element)
            element.check()
        else:
            element = self.page.locator(form_field.selector)
            self.wait_for_element(element)
            if form_field.type in (FieldType.INPUT, FieldType.TEXTAREA):
                element.clear()
                element.fill(str(value))
            elif form_field.type is FieldType.SELECT:
                element.select_option(str(value))
            elif form_field.type is FieldType.CHECKBOX:
                if value:
                    element.check()
                else:
                    element.uncheck()
            else:
                raise ConfigurationError(
                    f"Field '{form_field.name}' has unsupported type '{form_field.type}'"
                )

        logger.debug(f"Filled {form_field.name}: {value}")

    # -------------------------------------------------------------------------
    # Submission
    # -------------------------------------------------------------------------

    def submit_form(self, expected_outcome: FormOutcome = "success") -> None:
        """
        Click submit, let the page settle, then check the outcome container.

        The outcome is asserted only when the matching container
        (success_container or error_container) is configured.
        """
        start = time.perf_counter()
        logger.info(f"Submitting form: {self.template_name}")
        self.take_template_screenshot("before-submit")

        submit_button = self.page.locator(self.config.submit_button)
        self.wait_for_element(submit_button)
        submit_button.click()

        self.settle()
        self.take_template_screenshot("after-submit")

        if expected_outcome == "success" and self.config.success_container:
            self.verify_element_visible(self.page.locator(self.config.success_container))
            logger.info("Form submission successful")
        elif expected_outcome == "error" and self.config.error_container:
            self.verify_element_visible(self.page.locator(self.config.error_container))
            logger.info("Form submission failed as expected")

        logger.info(f"Form submission completed in {(time.perf_counter() - start) * 1000:.2f}ms")

    # -------------------------------------------------------------------------
    # Validation
    # -------------------------------------------------------------------------

    def _has_required_indicator(self, element: Locator) -> bool:
        if element.get_attribute("required") is not None:
            return True
        return bool(
            element.evaluate(
                "el => el.classList.contains('required')"
                " || (el.parentElement !== null && el.parentElement.classList.contains('required'))"
            )
        )

    def validate_fields(self) -> None:
        """
        Assert every declared field is visible.

        Required fields without a required attribute or a ``required``
        CSS class (on the element or its parent) are logged, not failed.
        """
        logger.info(f"Validating form fields: {self.template_name}")

        for form_field in self.config.fields:
            element = self.page.locator(form_field.selector)
            if form_field.type is FieldType.RADIO:
                element = element.first
            self.verify_element_visible(element)

            if form_field.required and not self._has_required_indicator(element):
                logger.warning(
                    f"Required field '{form_field.name}' may not have proper validation indicators"
                )

        self.take_template_screenshot("field-validation")
        logger.info("Field validation completed")

    # -------------------------------------------------------------------------
    # Reset
    # -------------------------------------------------------------------------

    def reset_form(self) -> None:
        """
        Return the form to its initial state.

        Uses the configured reset control when there is one. Otherwise
        inputs and textareas are cleared and checkboxes unchecked;
        select and radio fields are left as they are.
        """
        if self.config.reset_button:
            reset_button = self.page.locator(self.config.reset_button)
            self.wait_for_element(reset_button)
            reset_button.click()
            logger.info(f"Form reset: {self.template_name}")
        else:
            untouched = []
            for form_field in self.config.fields:
                if form_field.type in (FieldType.INPUT, FieldType.TEXTAREA):
                    self.page.locator(form_field.selector).clear()
                elif form_field.type is FieldType.CHECKBOX:
                    self.page.locator(form_field.selector).uncheck()
                else:
                    untouched.append(form_field.name)
            logger.info(f"Manual form reset: {self.template_name}")
            if untouched:
                logger.info(f"Manual reset left select/radio fields unchanged: {', '.join(untouched)}")

        self.take_template_screenshot("after-reset")


# -----------------------------------------------------------------------------
# Built-in Configurations
# -----------------------------------------------------------------------------

def signup_form_template() -> FormTemplateConfig:
    """Account information form shown after the initial signup step."""
    return FormTemplateConfig(
        template_name="signup-form",
        selectors={
            "form": 'form[action="/signup"]',
            "submitButton": '[data-qa="create-account"]',
            "successMessage": '[data-qa="account-created"]',
            "errorMessage": ".alert-danger, .error-message",
        },
        fields=[
            FormField(name="name", selector='[data-qa="signup-name"]', required=True),
            FormField(name="email", selector='[data-qa="signup-email"]', required=True),
            FormField(name="password", selector='[data-qa="password"]', required=True),
            FormField(name="confirmPassword", selector='[data-qa="confirm-password"]'),
            FormField(name="firstName", selector='[data-qa="first_name"]'),
            FormField(name="lastName", selector='[data-qa="last_name"]'),
            FormField(name="company", selector='[data-qa="company"]'),
            FormField(name="address", selector='[data-qa="address"]'),
            FormField(name="country", selector='[data-qa="country"]', type=FieldType.SELECT),
            FormField(name="state", selector='[data-qa="state"]'),
            FormField(name="city", selector='[data-qa="city"]'),
            FormField(name="zipcode", selector='[data-qa="zipcode"]'),
            FormField(name="mobile", selector='[data-qa="mobile_number"]'),
        ],
        submit_button='[data-qa="create-account"]',
        success_container='[data-qa="account-created"]',
        error_container=".alert-danger, .error-message",
    )


def login_form_template() -> FormTemplateConfig:
    return FormTemplateConfig(
        template_name="login-form",
        selectors={
            "form": 'form[action="/login"]',
            "submitButton": '[data-qa="login-button"]',
            "successMessage": ".navbar-nav",
            "errorMessage": ".login-form p",
        },
        fields=[
            FormField(name="email", selector='[data-qa="login-email"]', required=True),
            FormField(name="password", selector='[data-qa="login-password"]', required=True),
        ],
        submit_button='[data-qa="login-button"]',
        success_container=".navbar-nav",
        error_container=".login-form p",
    )


def initial_signup_form_template() -> FormTemplateConfig:
    """Name and email step of the signup flow."""
    return FormTemplateConfig(
        template_name="initial-signup-form",
        selectors={
            "form": 'form[action="/signup"]',
            "submitButton": '[data-qa="signup-button"]',
            "successMessage": '[data-qa="account-created"]',
            "errorMessage": ".signup-form p",
        },
        fields=[
            FormField(name="name", selector='[data-qa="signup-name"]', required=True),
            FormField(name="email", selector='[data-qa="signup-email"]', required=True),
        ],
        submit_button='[data-qa="signup-button"]',
        success_container='[data-qa="account-created"]',
        error_container=".signup-form p",
    )

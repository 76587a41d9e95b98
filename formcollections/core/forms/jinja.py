"""
Jinja2 Integration
==================

Expose the form builders to Jinja2 templates. Builder output is
``Markup`` and passes through autoescaping untouched.
"""

from typing import Any, Optional, Type

import jinja2

from formcollections.config.logging import get_logger
from formcollections.config.settings import Settings, get_settings
from formcollections.core.forms.base_builder import BaseFormBuilder
from formcollections.core.forms.builder import FormBuilder, form_for

logger = get_logger(__name__)


def register_form_helpers(
    env: jinja2.Environment,
    settings: Optional[Settings] = None,
    builder: Type[BaseFormBuilder] = FormBuilder,
) -> jinja2.Environment:
    """
    Install a ``form_for`` global on a Jinja2 environment.

    Templates then build forms with::

        {% set f = form_for("user", user) %}
        {{ f.collection_radio("options", options, 0, 1) }}

    Args:
        env: Environment to extend
        settings: Settings for builders created from templates
        builder: Builder class returned by ``form_for``

    Returns:
        The same environment
    """
    settings = settings or get_settings()

    def template_form_for(object_name: Optional[str], obj: Any = None) -> BaseFormBuilder:
        return form_for(object_name, obj, builder=builder, settings=settings)

    env.globals["form_for"] = template_form_for
    logger.debug("Registered form helpers", builder=builder.__name__)
    return env


def create_environment(
    loader: Optional[jinja2.BaseLoader] = None,
    settings: Optional[Settings] = None,
) -> jinja2.Environment:
    """Create an autoescaping environment with the form helpers installed."""
    env = jinja2.Environment(
        loader=loader,
        autoescape=jinja2.select_autoescape(["html", "xml"], default_for_string=True),
    )
    return register_form_helpers(env, settings=settings)

"""Models describing prompt inputs."""

from typing import Optional, Union

from pydantic import BaseModel, Field


class Diagnostic(BaseModel):
    """An editor diagnostic (compiler error, lint warning, ...)."""

    source: Optional[str] = Field(default=None, description="Tool that produced it; rendered as 'Error' when absent")
    message: str = Field(default="", description="Diagnostic message")
    code: Optional[Union[str, int]] = Field(default=None, description="Rule or error code")


class EnhancementOptions(BaseModel):
    """Toggles for structural enhancement of a template."""

    validate_inputs: bool = Field(default=True, description="Warn about placeholders with no parameter")
    enhance_structure: bool = Field(default=True, description="Wrap the template in task-context markers")
    add_error_handling: bool = Field(default=True, description="Append the clarifying-questions footer")

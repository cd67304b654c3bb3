"""Pydantic models for filter options and API requests/responses"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class FilterOptions(BaseModel):
    """Options fixed for the whole stream.

    The symmetric ``context`` value is added to both windows, so
    ``before_context=1, context=2`` yields three lines of leading context.
    """

    model_config = ConfigDict(frozen=True, extra='forbid')

    before_context: int = Field(default=0, ge=0, description='Lines to emit before each hit (-B)')
    after_context: int = Field(default=0, ge=0, description='Lines to emit after each hit (-A)')
    context: int = Field(default=0, ge=0, description='Lines to emit before and after each hit (-C)')
    count_only: bool = Field(default=False, description='Emit only the number of hits (-c)')
    ignore_case: bool = Field(default=False, description='Case-insensitive matching (-i)')
    invert: bool = Field(default=False, description='Select lines that do not match (-v)')
    literal: bool = Field(default=False, description='Treat the pattern as a fixed string (-F)')
    number_lines: bool = Field(default=False, description='Prefix output lines with their line number (-n)')

    @property
    def before_window(self) -> int:
        return self.before_context + self.context

    @property
    def after_window(self) -> int:
        return self.after_context + self.context


class FilterRequest(BaseModel):
    """Body of a POST /v1/filter request"""

    pattern: str = Field(..., description='Regular expression, or fixed string when options.literal is set')
    text: str = Field(..., description='Input text; split into lines on \\n')
    options: FilterOptions = Field(default_factory=FilterOptions, description='Filter options')


class HealthResponse(BaseModel):
    """Health check response with basic introspection data"""

    status: str = Field(..., examples=['ok'])
    app_version: str = Field(..., examples=['0.1.0'], description='Application version')
    python_version: str = Field(..., examples=['3.12.4'], description='Python interpreter version')
    constants: dict[str, Any] = Field(
        default_factory=dict,
        examples=[{'LOG_LEVEL': 'INFO', 'MAX_TEXT_BYTES': 67108864}],
        description='Application configuration constants',
    )
    environment: dict[str, str] = Field(
        default_factory=dict,
        examples=[{'LINEGREP_LOG_LEVEL': 'INFO'}],
        description='Application-related environment variables',
    )

"""Pydantic schema for API error responses."""

from pydantic import BaseModel, Field


class ErrorDetailSchema(BaseModel):
    """One problem found while handling the request."""

    field: str | None = Field(
        None,
        description="camelCase path of the offending field, if any",
        examples=["firstName"],
    )
    message: str = Field(
        ...,
        description="Human-readable description of the problem",
        examples=["String should have at least 1 character"],
    )


class ErrorResponseSchema(BaseModel):
    """Standard error response format for all API errors."""

    title: str = Field(
        ...,
        description="Short summary of the error class",
        examples=["Bad Request! Consult the documentation"],
    )
    timestamp: str = Field(
        ...,
        description="When the error occurred (ISO 8601, UTC)",
    )
    status: int = Field(
        ...,
        description="HTTP status code",
        examples=[400],
    )
    exception: str = Field(
        ...,
        description="Exception class that produced the error",
    )
    details: list[ErrorDetailSchema] = Field(
        ...,
        description="Individual problems",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "title": "Bad Request! Consult the documentation",
                    "timestamp": "2025-10-01T12:00:00+00:00",
                    "status": 400,
                    "exception": "class credit_app.domain.exceptions.customer.CustomerNotFoundException",
                    "details": [{"field": None, "message": "Id 2 not found"}],
                }
            ]
        }
    }

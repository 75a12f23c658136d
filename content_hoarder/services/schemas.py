"""Action inputs and the result envelope returned to the host."""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

DEFAULT_PAGE_LIMIT = 20

ResponseMode = Literal["template", "passthrough"]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class ActionResult(_CamelModel):
    """Envelope for every action: template data for the agent, or raw user content."""

    response_mode: ResponseMode
    agent_data: dict[str, Any] | None = None
    user_content: dict[str, Any] | None = None

    @classmethod
    def template(cls, template: str, **agent_data: Any) -> ActionResult:
        return cls(response_mode="template", agent_data={"template": template, **agent_data})

    @classmethod
    def passthrough(
        cls, content_type: str, content: str, metadata: dict[str, Any] | None = None
    ) -> ActionResult:
        user_content: dict[str, Any] = {"contentType": content_type, "content": content}
        if metadata is not None:
            user_content["metadata"] = metadata
        return cls(response_mode="passthrough", user_content=user_content)

    @classmethod
    def error(cls, message: str) -> ActionResult:
        return cls.template("error", message=message)

    def to_envelope(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


def _none_to_empty(value: Any) -> Any:
    return [] if value is None else value


StrList = Annotated[list[str], BeforeValidator(_none_to_empty)]


class _Paged(_CamelModel):
    limit: int = Field(default=DEFAULT_PAGE_LIMIT, ge=0)
    offset: int = Field(default=0, ge=0)

    @field_validator("limit", mode="before")
    @classmethod
    def default_limit(cls, value: Any) -> Any:
        # 0 and null mean "use the default page size"
        return value or DEFAULT_PAGE_LIMIT

    @field_validator("offset", mode="before")
    @classmethod
    def default_offset(cls, value: Any) -> Any:
        return value or 0


class AddInspirationInput(_CamelModel):
    url: str = Field(..., min_length=1)
    tags: StrList = Field(default_factory=list)


class ListContentInput(_Paged):
    tags: StrList = Field(default_factory=list)


class GetContentInput(_CamelModel):
    content_id: str


class CreateArticleInput(_CamelModel):
    content_ids: list[str]
    instructions: str
    title: str | None = None


class ListArticlesInput(_Paged):
    pass


class UpdateArticleInput(_CamelModel):
    article_id: str
    instructions: str
    additional_content_ids: StrList = Field(default_factory=list)


class DeleteContentInput(_CamelModel):
    content_id: str

"""
Input models for the YouTrack comment and attachment tools.
"""

import base64
import binascii

from pydantic import Field, field_validator

from ..base import PaginatedInput
from .issues import IssueRef

USES_MARKDOWN_DESCRIPTION = "Whether the comment uses Markdown formatting"


class GetCommentsInput(IssueRef, PaginatedInput):
    """Arguments of ``youtrack_get_comments``."""


class AddCommentInput(IssueRef):
    """Arguments of ``youtrack_add_comment``."""

    text: str = Field(description="Comment text")
    uses_markdown: bool = Field(
        default=False, alias="usesMarkdown", description=USES_MARKDOWN_DESCRIPTION
    )


class UpdateCommentInput(IssueRef):
    """Arguments of ``youtrack_update_comment``."""

    comment_id: str = Field(alias="commentId", description="Comment ID")
    text: str = Field(description="Updated comment text")
    uses_markdown: bool = Field(
        default=False, alias="usesMarkdown", description=USES_MARKDOWN_DESCRIPTION
    )


class DeleteCommentInput(IssueRef):
    """Arguments of ``youtrack_delete_comment``."""

    comment_id: str = Field(alias="commentId", description="Comment ID")


class GetAttachmentsInput(IssueRef, PaginatedInput):
    """Arguments of ``youtrack_get_attachments``."""


class AddAttachmentInput(IssueRef):
    """Arguments of ``youtrack_add_attachment``."""

    filename: str = Field(min_length=1, description="Name of the file to attach")
    content: str = Field(description="File content, base64-encoded")

    @field_validator("content")
    @classmethod
    def content_is_base64(cls, value: str) -> str:
        try:
            base64.b64decode(value, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValueError("content must be base64-encoded") from e
        return value

    def decoded_content(self) -> bytes:
        """Return the raw bytes of the attachment."""
        return base64.b64decode(self.content, validate=True)

"""Mutable view state owned by the presentation shell."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..constants import COPY_ID_BONUS, COPY_ID_POST_PREFIX, COPY_ID_SCRIPT, ShellStatus, Tab
from ..content.models import DigitalPackage, GenerationResult
from ..errors import UnknownCopyTargetError


@dataclass
class ShellState:
    """Everything the result viewer renders.

    `package` and `cover_image_url` are only ever assigned together.
    """

    topic: str = ""
    loading: bool = False
    error: str | None = None
    package: DigitalPackage | None = None
    cover_image_url: str | None = None
    active_tab: Tab = Tab.EBOOK
    copied: dict[str, bool] = field(default_factory=dict)

    @property
    def status(self) -> ShellStatus:
        if self.loading:
            return ShellStatus.LOADING
        if self.error:
            return ShellStatus.ERROR
        if self.package is not None:
            return ShellStatus.SUCCESS
        return ShellStatus.IDLE

    @property
    def can_submit(self) -> bool:
        return not self.loading and bool(self.topic.strip())

    @property
    def has_result(self) -> bool:
        return self.package is not None and self.cover_image_url is not None

    @property
    def result(self) -> GenerationResult | None:
        if not self.has_result:
            return None
        return GenerationResult(package=self.package, cover_image_url=self.cover_image_url)

    @property
    def cover_filename(self) -> str | None:
        result = self.result
        return result.cover_filename if result is not None else None

    def is_copied(self, item_id: str) -> bool:
        return self.copied.get(item_id, False)


def post_copy_id(index: int) -> str:
    return f"{COPY_ID_POST_PREFIX}{index}"


def copy_text_for(package: DigitalPackage | None, item_id: str) -> str:
    """Resolve the text behind a copy button.

    Raises:
        UnknownCopyTargetError: No package yet, or the id names no item.
    """
    if package is None:
        raise UnknownCopyTargetError(item_id)

    if item_id == COPY_ID_BONUS:
        return package.bonus.content
    if item_id == COPY_ID_SCRIPT:
        return package.sales_script
    if item_id.startswith(COPY_ID_POST_PREFIX):
        suffix = item_id[len(COPY_ID_POST_PREFIX):]
        if suffix.isdigit() and int(suffix) < len(package.posts):
            return package.posts[int(suffix)]

    raise UnknownCopyTargetError(item_id)

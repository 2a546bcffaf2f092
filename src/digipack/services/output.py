"""Output service for saving generated packages.

Layout of a saved package:

    <output_dir>/<slug>/
        package.json
        ebook.md
        posts.md
        bonus.md
        sales-script.md
        cover-<slug>.<ext>
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..content.models import DigitalPackage, GenerationResult


class OutputService:
    """Handles saving generated packages to disk.

    Usage:
        service = OutputService(Path("output"))
        path = service.save(result, topic="productivity for freelancers")
    """

    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)

    def get_output_path(self, package: "DigitalPackage") -> Path:
        """Directory for a package, always a direct child of output_dir.

        Raises:
            ValueError: If the package slug would escape output_dir.
        """
        root = self.output_dir.resolve()
        output_path = (root / package.slug).resolve()
        if output_path.parent != root:
            raise ValueError(f"Package path escapes output directory: {output_path}")
        return output_path

    def save(self, result: "GenerationResult", topic: str | None = None) -> Path:
        """Save a generated package to disk.

        Returns:
            Path to the package directory.
        """
        package = result.package
        output_path = self.get_output_path(package)
        output_path.mkdir(parents=True, exist_ok=True)

        (output_path / "ebook.md").write_text(render_ebook_markdown(package), encoding="utf-8")
        (output_path / "posts.md").write_text(render_posts_markdown(package), encoding="utf-8")
        (output_path / "bonus.md").write_text(
            f"# {package.bonus.title}\n\n{package.bonus.content.strip()}\n",
            encoding="utf-8",
        )
        (output_path / "sales-script.md").write_text(
            f"# Sales Script\n\n{package.sales_script.strip()}\n",
            encoding="utf-8",
        )

        cover_filename = result.cover_filename
        (output_path / cover_filename).write_bytes(result.cover_image_bytes())

        metadata = {
            "topic": topic,
            "cover": cover_filename,
            "package": package.model_dump(by_alias=True),
        }
        with open(output_path / "package.json", "w", encoding="utf-8") as f:
            json.dump(metadata, f, indent=2, ensure_ascii=False)

        return output_path


def render_ebook_markdown(package: "DigitalPackage") -> str:
    lines = [f"# {package.ebook.title}", ""]
    for chapter in package.ebook.chapters:
        lines.extend([f"## {chapter.title}", "", chapter.content.strip(), ""])
    return "\n".join(lines)


def render_posts_markdown(package: "DigitalPackage") -> str:
    blocks = [f"## Post {i}\n\n{post.strip()}" for i, post in enumerate(package.posts, start=1)]
    return "# Social Media Posts\n\n" + "\n\n---\n\n".join(blocks) + "\n"

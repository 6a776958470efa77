"""Tests for category slugs and storage naming."""

import pytest

from publisher.core.config import PublishingSettings
from publisher.modules.publishing import PathResolver, slugify_category


class TestSlugifyCategory:
    @pytest.mark.parametrize(
        ("category", "expected"),
        [
            ("Web Design", "web-design"),
            ("  Web   Design  ", "web-design"),
            ("Web\t\nDesign", "web-design"),
            ("web-design", "web-design"),
            ("Photography", "photography"),
            ("UI UX Research", "ui-ux-research"),
        ],
    )
    def test_slugify(self, category: str, expected: str) -> None:
        assert slugify_category(category) == expected

    def test_slugify_is_idempotent(self) -> None:
        once = slugify_category("Motion  Graphics")
        assert slugify_category(once) == once


class TestPathResolver:
    def test_paths_for_category(self, publishing_settings: PublishingSettings) -> None:
        paths = PathResolver(publishing_settings).paths_for("Web Design")

        assert paths.category_slug == "web-design"
        assert paths.assets_directory == "public/assets/web-design"
        assert paths.assets_url == "/assets/web-design"
        assert paths.markdown_directory == "src/content/work"

    def test_resolve_uses_one_based_index(self, publishing_settings: PublishingSettings) -> None:
        image = PathResolver(publishing_settings).resolve("Web Design", "Brand refresh", 0)

        assert image.index == 1
        assert image.asset_path == "public/assets/web-design/1.webp"
        assert image.asset_url == "/assets/web-design/1.webp"
        assert image.markdown_file_name == "PGWE1.md"
        assert image.markdown_path == "src/content/work/PGWE1.md"

    def test_names_are_unique_within_submission(self, publishing_settings: PublishingSettings) -> None:
        resolver = PathResolver(publishing_settings)
        resolved = [resolver.resolve("Photography", "Any", i) for i in range(12)]

        assert len({image.asset_path for image in resolved}) == 12
        assert len({image.markdown_file_name for image in resolved}) == 12
        assert resolved[10].markdown_file_name == "PGPH11.md"

    def test_same_category_prefix_maps_to_same_names(self, publishing_settings: PublishingSettings) -> None:
        resolver = PathResolver(publishing_settings)

        first = resolver.resolve("Web Design", "First project", 0)
        second = resolver.resolve("Web Development", "Second project", 0)

        assert first.markdown_file_name == second.markdown_file_name

    @pytest.mark.parametrize(
        ("category", "expected"),
        [("A B", "PGAB1.md"), ("  Web   Design ", "PGWE1.md"), ("X", "PGX1.md")],
    )
    def test_prefix_skips_whitespace(
        self, publishing_settings: PublishingSettings, category: str, expected: str
    ) -> None:
        image = PathResolver(publishing_settings).resolve(category, "x", 0)

        assert image.markdown_file_name == expected
        assert " " not in image.markdown_path

    def test_custom_roots(self) -> None:
        settings = PublishingSettings(
            assets_root="/static/img/",
            assets_url_prefix="https://cdn.example.com/img/",
            content_root="content",
            content_type="projects",
            file_prefix="P",
        )
        image = PathResolver(settings).resolve("Art", "x", 2)

        assert image.asset_path == "static/img/art/3.webp"
        assert image.asset_url == "https://cdn.example.com/img/art/3.webp"
        assert image.markdown_path == "content/projects/PAR3.md"

    def test_negative_index_rejected(self, publishing_settings: PublishingSettings) -> None:
        with pytest.raises(ValueError):
            PathResolver(publishing_settings).resolve("Art", "x", -1)

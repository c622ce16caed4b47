"""Tests for ContextVar-based render configuration.

Validates defaults, thread isolation, and context manager behavior.
"""

from threading import Thread

import pytest

from llano import (
    ListMarkers,
    PlainText,
    RenderConfig,
    convert,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)


class TestRenderConfigDataclass:
    """Test RenderConfig frozen dataclass behavior."""

    def test_default_values(self) -> None:
        config = RenderConfig()
        assert config.list_markers is ListMarkers.NONE
        assert config.drop_strikethrough is True
        assert config.table_cell_separator == "\t"
        assert config.tables_enabled is True
        assert config.strikethrough_enabled is True

    def test_immutability(self) -> None:
        config = RenderConfig()
        with pytest.raises(AttributeError):
            config.drop_strikethrough = False  # type: ignore[misc]

    def test_equality(self) -> None:
        assert RenderConfig(list_markers=ListMarkers.BULLET) == RenderConfig(
            list_markers=ListMarkers.BULLET
        )


class TestFromDict:
    def test_known_keys(self) -> None:
        config = RenderConfig.from_dict({"drop_strikethrough": False, "tables_enabled": False})
        assert config.drop_strikethrough is False
        assert config.tables_enabled is False

    def test_unknown_keys_ignored(self) -> None:
        assert RenderConfig.from_dict({"unknown_key": 1}) == RenderConfig()

    def test_list_markers_by_value(self) -> None:
        config = RenderConfig.from_dict({"list_markers": "ordinal"})
        assert config.list_markers is ListMarkers.ORDINAL

    def test_list_markers_by_member(self) -> None:
        config = RenderConfig.from_dict({"list_markers": ListMarkers.BULLET})
        assert config.list_markers is ListMarkers.BULLET

    def test_invalid_list_markers(self) -> None:
        with pytest.raises(ValueError):
            RenderConfig.from_dict({"list_markers": "roman"})


class TestContextVar:
    def test_default_is_active(self) -> None:
        assert get_render_config() == RenderConfig()

    def test_set_and_reset(self) -> None:
        set_render_config(RenderConfig(list_markers=ListMarkers.BULLET))
        try:
            assert convert("- a") == "• a"
        finally:
            reset_render_config()
        assert convert("- a") == "a"

    def test_context_manager_restores(self) -> None:
        outer = RenderConfig(drop_strikethrough=False)
        with render_config_context(outer):
            with render_config_context(RenderConfig(list_markers=ListMarkers.ORDINAL)):
                assert convert("1. a\n2. b") == "1. a\n2. b"
            assert get_render_config() is outer
        assert get_render_config() == RenderConfig()

    def test_context_manager_restores_on_error(self) -> None:
        with pytest.raises(RuntimeError):
            with render_config_context(RenderConfig(drop_strikethrough=False)):
                raise RuntimeError("boom")
        assert get_render_config() == RenderConfig()

    def test_thread_isolation(self) -> None:
        results: list[str] = []

        def worker() -> None:
            set_render_config(RenderConfig(list_markers=ListMarkers.BULLET))
            results.append(convert("- a"))

        thread = Thread(target=worker)
        thread.start()
        thread.join()

        assert results == ["• a"]
        assert get_render_config() == RenderConfig()
        assert convert("- a") == "a"


class TestPlainTextConfig:
    def test_config_fixed_at_construction(self) -> None:
        plain = PlainText(RenderConfig(list_markers=ListMarkers.BULLET))
        with render_config_context(RenderConfig(list_markers=ListMarkers.ORDINAL)):
            assert plain("1. a") == "• a"

    def test_captures_active_config(self) -> None:
        with render_config_context(RenderConfig(drop_strikethrough=False)):
            plain = PlainText()
        assert plain.config.drop_strikethrough is False
        assert plain("~~kept~~") == "kept"

    def test_bullet_layout_flattens_numbering(self) -> None:
        markdown = (
            "\n1. First ordered list item\n"
            "2. Another item\n"
            "1. Actual numbers don't matter, just that it's a number\n"
            "  1. Ordered sub-list\n"
            "4. And another item.\n"
        )
        expected = (
            "• First ordered list item\n"
            "• Another item\n"
            "• Actual numbers don't matter, just that it's a number\n"
            "• Ordered sub-list\n"
            "• And another item."
        )
        assert PlainText(RenderConfig(list_markers=ListMarkers.BULLET))(markdown) == expected

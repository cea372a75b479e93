"""
Tests for the pattern library page.
"""

from adapters.pattern_library import export_pattern_library_html, render_pattern_library_html
from core.domain.style import Variant


class TestPatternLibrary:
    def test_render_when_blank_then_all_components(self, settings):
        html = render_pattern_library_html(settings=settings)

        assert html.startswith("<!doctype html>")
        for variant in Variant:
            assert f'class="alert alert-{variant.value}"' in html
            assert f'class="btn btn-outline-{variant.value}"' in html
        assert 'class="alert alert-warning alert-dismissible"' in html
        assert '<ol class="breadcrumb">' in html
        assert 'class="pagination pagination-sm"' in html
        assert 'class="pagination pagination-lg"' in html
        assert 'Favourite color <span class="text-danger">(*)</span>' in html
        assert 'type="email"' in html
        assert "<textarea" in html
        assert settings.bootstrap_css_url in html
        assert settings.bootstrap_js_url in html
        assert "is-invalid" not in html

    def test_render_when_submission_then_validation_states(self, settings):
        html = render_pattern_library_html(
            submission={"name": "Ada", "favourite_color": "", "email": "nope"}, settings=settings
        )
        assert "form-control is-invalid" in html
        assert "form-control is-valid" in html

    def test_export_when_nested_path_then_creates_dirs(self, tmp_path, settings):
        out = tmp_path / "nested" / "library.html"
        path = export_pattern_library_html(output_path=out, settings=settings)
        assert path == out
        assert out.read_text(encoding="utf-8").startswith("<!doctype html>")

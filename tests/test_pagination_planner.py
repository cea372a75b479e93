"""
Unit tests for the pagination planner.

Covers the window calculation (clamp then reflow), control ordering and
enabled/active flags, and URL resolution for enabled links only.
"""

import pytest
from pydantic import ValidationError

from core.domain.models import PageLinkKind, PaginationLabels, PaginationRequest
from core.services.pagination_planner import DISABLED_HREF, plan, resolve_links, visible_window


def _request(current, total, max_visible=5, show_first_last=True):
    return PaginationRequest(
        current_page=current,
        total_pages=total,
        max_visible_pages=max_visible,
        show_first_last=show_first_last,
    )


def _numbers(links):
    return [link.page_number for link in links if link.kind is PageLinkKind.PAGE]


class TestPlan:
    """Tests for plan()."""

    # ─────────────────────────────────────────────────────────────────────────
    # Empty plans
    # ─────────────────────────────────────────────────────────────────────────

    @pytest.mark.parametrize("total", [1, 0, -3])
    def test_plan_when_one_page_or_less_then_empty(self, total):
        assert plan(_request(1, total)) == []

    def test_plan_when_one_page_without_first_last_then_empty(self):
        assert plan(_request(1, 1, max_visible=1, show_first_last=False)) == []

    # ─────────────────────────────────────────────────────────────────────────
    # Documented scenarios
    # ─────────────────────────────────────────────────────────────────────────

    def test_plan_when_middle_page_then_all_controls_enabled(self):
        links = plan(_request(5, 20))

        kinds = [link.kind for link in links]
        assert kinds == [PageLinkKind.FIRST, PageLinkKind.PREVIOUS] + [PageLinkKind.PAGE] * 5 + [
            PageLinkKind.NEXT,
            PageLinkKind.LAST,
        ]

        first, previous, *pages, nxt, last = links
        assert (first.page_number, first.enabled) == (1, True)
        assert (previous.page_number, previous.enabled) == (4, True)
        assert [p.page_number for p in pages] == [3, 4, 5, 6, 7]
        assert [p.page_number for p in pages if p.is_active] == [5]
        assert all(p.enabled for p in pages)
        assert (nxt.page_number, nxt.enabled) == (6, True)
        assert (last.page_number, last.enabled) == (20, True)

    def test_plan_when_first_page_then_backward_controls_disabled(self):
        first, previous, *pages, nxt, last = plan(_request(1, 3))

        assert first.enabled is False
        assert previous.enabled is False
        assert previous.page_number == 0
        assert [p.page_number for p in pages] == [1, 2, 3]
        assert [p.is_active for p in pages] == [True, False, False]
        assert (nxt.page_number, nxt.enabled) == (2, True)
        assert (last.page_number, last.enabled) == (3, True)

    def test_plan_when_last_page_then_window_reflows_left(self):
        links = plan(_request(20, 20))

        assert _numbers(links) == [16, 17, 18, 19, 20]
        nxt, last = links[-2:]
        assert (nxt.page_number, nxt.enabled) == (21, False)
        assert (last.page_number, last.enabled) == (20, False)

    def test_plan_when_near_start_then_window_not_right_biased(self):
        assert _numbers(plan(_request(2, 20))) == [1, 2, 3, 4, 5]

    def test_plan_when_even_window_then_left_of_current_gets_half(self):
        assert _numbers(plan(_request(5, 20, max_visible=4))) == [3, 4, 5, 6]

    def test_plan_when_first_last_hidden_then_only_prev_next(self):
        links = plan(_request(3, 10, show_first_last=False))
        assert links[0].kind is PageLinkKind.PREVIOUS
        assert links[-1].kind is PageLinkKind.NEXT
        assert len(links) == 2 + 5

    def test_plan_when_default_labels_then_guillemets(self):
        links = plan(_request(2, 3))
        assert [link.label for link in links] == ["«", "‹", "1", "2", "3", "›", "»"]

    def test_plan_when_custom_labels_then_used(self):
        request = PaginationRequest(
            current_page=2,
            total_pages=3,
            labels=PaginationLabels(first="First", last="Last", previous="Prev", next="Next"),
        )
        labels = [link.label for link in plan(request)]
        assert labels[:2] == ["First", "Prev"]
        assert labels[-2:] == ["Next", "Last"]

    # ─────────────────────────────────────────────────────────────────────────
    # Properties
    # ─────────────────────────────────────────────────────────────────────────

    @pytest.mark.parametrize("total", [2, 3, 5, 7, 12, 40])
    @pytest.mark.parametrize("max_visible", [1, 2, 5, 6, 9])
    def test_plan_window_size_and_active_page(self, total, max_visible):
        for current in range(1, total + 1):
            links = plan(_request(current, total, max_visible=max_visible))
            numbers = _numbers(links)
            assert len(numbers) == min(max_visible, total)
            assert numbers == list(range(numbers[0], numbers[-1] + 1))
            active = [link.page_number for link in links if link.is_active]
            assert active == [current]

    def test_labels_when_unknown_key_then_raises(self):
        with pytest.raises(ValidationError):
            PaginationLabels(nxt="Next")

    def test_request_when_max_visible_zero_then_raises(self):
        with pytest.raises(ValidationError):
            _request(1, 10, max_visible=0)


class TestVisibleWindow:
    @pytest.mark.parametrize(
        "current, total, max_visible, expected",
        [
            (1, 3, 5, (1, 3)),
            (5, 20, 5, (3, 7)),
            (20, 20, 5, (16, 20)),
            (19, 20, 5, (16, 20)),
            (10, 20, 1, (10, 10)),
        ],
    )
    def test_visible_window(self, current, total, max_visible, expected):
        assert visible_window(current, total, max_visible) == expected


class TestResolveLinks:
    """Tests for resolve_links()."""

    def test_resolve_when_disabled_then_url_function_not_called(self, page_url):
        resolved = resolve_links(plan(_request(1, 3)), page_url)

        assert page_url.calls == [1, 2, 3, 2, 3]
        assert [link.href for link in resolved[:2]] == [DISABLED_HREF, DISABLED_HREF]

    def test_resolve_when_last_page_then_never_asks_past_the_end(self, page_url):
        resolve_links(plan(_request(20, 20)), page_url)
        assert 21 not in page_url.calls
        assert 0 not in page_url.calls

    def test_resolve_keeps_descriptor_fields(self, page_url):
        resolved = resolve_links(plan(_request(5, 20)), page_url)
        active = [link for link in resolved if link.is_active]
        assert len(active) == 1
        assert active[0].href == "?page=5"
        assert active[0].label == "5"

    def test_resolve_when_empty_plan_then_empty(self, page_url):
        assert resolve_links([], page_url) == []
        assert page_url.calls == []

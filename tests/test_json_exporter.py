"""
Tests for the pagination plan JSON export.
"""

import json

from adapters.json_exporter import export_pagination_plan_json
from core.domain.models import PaginationRequest
from core.services.pagination_planner import plan, resolve_links


def test_export_when_resolved_plan_then_stable_json(tmp_path, page_url):
    links = resolve_links(plan(PaginationRequest(current_page=1, total_pages=3)), page_url)
    out = export_pagination_plan_json(links=links, output_path=tmp_path / "out" / "plan.json")

    text = out.read_text(encoding="utf-8")
    payload = json.loads(text)
    assert len(payload) == 7
    assert payload[0] == {
        "enabled": False,
        "href": "#",
        "is_active": False,
        "kind": "first",
        "label": "«",
        "page_number": 1,
    }
    assert payload[2]["is_active"] is True
    assert "«" in text
    assert text.endswith("\n")


def test_export_when_unresolved_plan_then_no_href(tmp_path):
    links = plan(PaginationRequest(current_page=2, total_pages=4, show_first_last=False))
    payload = json.loads(export_pagination_plan_json(links=links, output_path=tmp_path / "p.json").read_text(encoding="utf-8"))
    assert [item["kind"] for item in payload] == ["previous", "page", "page", "page", "page", "next"]
    assert "href" not in payload[0]

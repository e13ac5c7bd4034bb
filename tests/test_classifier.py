"""Tests for element classification."""

import pytest

from playwright_dom_mcp.core.exceptions import UnsupportedElementError
from playwright_dom_mcp.dom.classifier import (
    Classification,
    NOISE_TAGS,
    classify_node,
    noise_tags,
)
from playwright_dom_mcp.dom.snapshot import NodeKind, SnapshotNode


def element(tag, attributes=(), assigned_slot=None):
    return SnapshotNode(
        kind=NodeKind.ELEMENT,
        tag_name=tag,
        attributes=list(attributes),
        assigned_slot=assigned_slot,
    )


class TestNoise:
    @pytest.mark.parametrize("tag", sorted(NOISE_TAGS))
    def test_noise_tags_are_pruned(self, tag):
        assert classify_node(element(tag), None) == Classification.PRUNE

    def test_tag_case_is_ignored(self):
        assert classify_node(element("script"), None) == Classification.PRUNE

    def test_font_and_br_only_pruned_when_strict(self):
        assert classify_node(element("FONT"), None, strict=True) == Classification.PRUNE
        assert classify_node(element("BR"), None, strict=True) == Classification.PRUNE
        assert classify_node(element("FONT"), None, strict=False) == Classification.KEEP
        assert classify_node(element("BR"), None, strict=False) == Classification.KEEP

    def test_noise_tag_sets(self):
        assert noise_tags(strict=False) == NOISE_TAGS
        assert noise_tags(strict=True) == NOISE_TAGS | {"FONT", "BR"}


class TestHidingAttributes:
    @pytest.mark.parametrize("name,value", [
        ("type", "hidden"),
        ("disabled", "true"),
        ("aria-hidden", "true"),
    ])
    def test_hidden_elements_are_pruned(self, name, value):
        node = element("DIV", [(name, value)])
        assert classify_node(node, None) == Classification.PRUNE

    @pytest.mark.parametrize("name,value", [
        ("type", "text"),
        ("disabled", ""),
        ("disabled", "disabled"),
        ("aria-hidden", "false"),
        ("type", "HIDDEN"),
    ])
    def test_other_values_are_kept(self, name, value):
        node = element("INPUT", [(name, value)])
        assert classify_node(node, None) == Classification.KEEP


class TestSlots:
    def test_slotted_element_outside_its_slot_is_skipped(self):
        assert classify_node(element("SPAN", assigned_slot=3), None) == Classification.SKIP
        assert classify_node(element("SPAN", assigned_slot=3), 7) == Classification.SKIP

    def test_slotted_element_inside_its_slot_is_kept(self):
        assert classify_node(element("SPAN", assigned_slot=3), 3) == Classification.KEEP

    def test_unslotted_element_is_kept_anywhere(self):
        assert classify_node(element("SPAN"), 3) == Classification.KEEP

    def test_prune_wins_over_skip(self):
        node = element("SCRIPT", assigned_slot=3)
        assert classify_node(node, None) == Classification.PRUNE


class TestUnsupported:
    def test_iframe_raises(self):
        with pytest.raises(UnsupportedElementError) as exc_info:
            classify_node(element("IFRAME"), None)
        assert str(exc_info.value) == "IFRAME not supported"
        assert exc_info.value.tag_name == "IFRAME"

    def test_hidden_iframe_is_pruned_not_raised(self):
        node = element("IFRAME", [("aria-hidden", "true")])
        assert classify_node(node, None) == Classification.PRUNE

    def test_iframe_slotted_elsewhere_is_skipped(self):
        assert classify_node(element("IFRAME", assigned_slot=2), None) == Classification.SKIP

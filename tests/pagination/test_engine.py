"""
Unit tests for the pagination engine.

Page writers are mocked; tests check planning results and the exact
order of writer calls.
"""

import pytest
from unittest.mock import MagicMock

from canvas_paginator.core.errors import ConfigurationError
from canvas_paginator.core.models import (
    DecisionKind,
    PageFormat,
    PageSize,
    RenderedDocument,
)
from canvas_paginator.pagination import (
    PaginationConfig,
    PaginationEngine,
    SegmentationMode,
    paginate_document,
)
from canvas_paginator.pagination.engine import EMPTY_CONTENT_WARNING


def _heights(plan):
    return [s.height_px for s in plan.segments]


@pytest.fixture
def mock_writer():
    writer = MagicMock()
    writer.page_count = 0
    writer.finish.return_value = "done"
    return writer


class TestPlan:

    def test_plan_when_tall_document_then_uniform_portrait_pages(self, tall_image):
        plan = PaginationEngine(PaginationConfig()).plan(RenderedDocument(tall_image))

        assert plan.is_landscape is False
        assert plan.mode is SegmentationMode.UNIFORM
        assert plan.geometry.page_format == PageFormat(210, 297)
        assert _heights(plan) == [1046, 1046, 908]
        assert plan.page_count == 3
        assert plan.warnings == ()

    def test_plan_when_wide_document_then_landscape(self, wide_image):
        plan = PaginationEngine(PaginationConfig()).plan(RenderedDocument(wide_image))

        assert plan.is_landscape is True
        assert plan.geometry.page_format == PageFormat(297, 210)
        # Landscape A4 printable height 190mm -> 718 rows
        assert _heights(plan) == [718, 282]

    def test_plan_when_force_landscape_then_landscape_for_tall_document(self, tall_image):
        config = PaginationConfig(force_landscape=True)
        plan = PaginationEngine(config).plan(RenderedDocument(tall_image))

        assert plan.is_landscape is True
        assert all(c.placement.height_mm <= 190 for c in plan.composed)

    def test_plan_when_markers_enabled_then_breaks_at_markers(self, tall_image):
        config = PaginationConfig(use_marker_pagination=True)
        doc = RenderedDocument.from_positions(tall_image, [500])

        plan = PaginationEngine(config).plan(doc)

        assert plan.mode is SegmentationMode.MARKERS
        assert _heights(plan) == [500, 1046, 1046, 408]
        assert plan.trace.decisions[0].kind is DecisionKind.MARKER_BREAK

    def test_plan_when_markers_disabled_then_ignores_markers(self, tall_image):
        doc = RenderedDocument.from_positions(tall_image, [500])

        plan = PaginationEngine(PaginationConfig()).plan(doc)

        assert plan.mode is SegmentationMode.UNIFORM
        assert _heights(plan) == [1046, 1046, 908]

    def test_plan_when_markers_enabled_but_none_found_then_uniform(self, tall_image):
        config = PaginationConfig(use_marker_pagination=True)
        plan = PaginationEngine(config).plan(RenderedDocument(tall_image))

        assert plan.mode is SegmentationMode.UNIFORM

    def test_plan_when_marker_already_passed_then_warns(self, tall_image):
        config = PaginationConfig(use_marker_pagination=True)
        doc = RenderedDocument.from_positions(tall_image, [1046, 1046])

        plan = PaginationEngine(config).plan(doc)

        assert _heights(plan) == [1046, 1046, 908]
        assert plan.warnings == (
            "Skipped break marker at 1046px (already passed)",
            "Skipped break marker at 1046px (already passed)",
        )

    def test_plan_when_scale_two_then_capacity_doubles(self):
        from PIL import Image
        image = Image.new("RGB", (1428, 6000))
        config = PaginationConfig(scale=2)

        plan = PaginationEngine(config).plan(RenderedDocument(image))

        assert _heights(plan) == [2093, 2093, 1814]

    def test_plan_when_letter_then_letter_format(self, tall_image):
        config = PaginationConfig(page_size=PageSize.LETTER)
        plan = PaginationEngine(config).plan(RenderedDocument(tall_image))

        assert plan.geometry.page_format == PageFormat(216, 279)

    def test_plan_when_empty_bitmap_then_empty_plan_with_warning(self):
        image = MagicMock(width=714, height=0)

        plan = PaginationEngine(PaginationConfig()).plan(RenderedDocument(image))

        assert plan.is_empty is True
        assert plan.page_count == 0
        assert plan.geometry is None
        assert plan.warnings == (EMPTY_CONTENT_WARNING,)

    def test_plan_when_repeated_then_identical(self, tall_image):
        engine = PaginationEngine(PaginationConfig(use_marker_pagination=True))
        doc = RenderedDocument.from_positions(tall_image, [700, 2000])

        assert engine.plan(doc) == engine.plan(doc)

    def test_plan_when_config_invalid_then_raises_before_work(self):
        with pytest.raises(ConfigurationError):
            PaginationEngine(PaginationConfig(margin_mm=150))

    def test_plan_when_scale_leaves_no_whole_row_then_raises_configuration_error(self):
        from PIL import Image
        with pytest.raises(ConfigurationError, match="under one pixel"):
            PaginationEngine(PaginationConfig(scale=0.0005)).plan(
                RenderedDocument(Image.new("RGB", (10, 10)))
            )


class TestPaginate:

    def test_paginate_when_three_segments_then_writer_calls_in_order(self, tall_image, mock_writer):
        mock_writer.page_count = 3

        result = PaginationEngine(PaginationConfig()).paginate(
            RenderedDocument(tall_image), mock_writer
        )

        names = [c[0] for c in mock_writer.mock_calls]
        assert names == ["begin", "draw", "new_page", "draw", "new_page", "draw", "finish"]
        mock_writer.begin.assert_called_once_with(PageFormat(210, 297))
        assert result.pages_written == 3
        assert result.output == "done"

    def test_paginate_when_drawing_then_passes_cropped_segments(self, tall_image, mock_writer):
        result = PaginationEngine(PaginationConfig()).paginate(
            RenderedDocument(tall_image), mock_writer
        )

        drawn = [call.args for call in mock_writer.draw.call_args_list]
        assert [img.size for img, _ in drawn] == [(714, 1046), (714, 1046), (714, 908)]
        assert [placement for _, placement in drawn] == list(result.plan.placements)

    def test_paginate_when_empty_then_writer_untouched(self, mock_writer):
        image = MagicMock(width=714, height=0)

        result = PaginationEngine(PaginationConfig()).paginate(RenderedDocument(image), mock_writer)

        assert mock_writer.mock_calls == []
        assert result.is_empty is True
        assert result.pages_written == 0
        assert result.warnings == (EMPTY_CONTENT_WARNING,)

    def test_paginate_document_when_called_then_same_as_engine(self, tall_image, mock_writer):
        result = paginate_document(RenderedDocument(tall_image), PaginationConfig(), mock_writer)

        assert result.plan.page_count == 3
        assert mock_writer.finish.call_count == 1

"""Tests for the Rich renderers."""

from recipectl.output.renderers import render_quiet, render_result
from recipectl.services.parse import ParseService
from recipectl.services.result import ServiceError, ServiceResult


class TestRenderResult:
    def test_single_index(self, service: ParseService) -> None:
        output = render_result(service.index("4"))
        assert "parse_index" in output
        assert "index: 4" in output

    def test_indices_table_verbose_shows_zero_based(self, service: ParseService) -> None:
        output = render_result(service.indices("1,5"), verbose=True)
        assert "Zero-based" in output
        assert "4" in output

    def test_steps_table(self, service: ParseService) -> None:
        output = render_result(service.steps(["Boil water", "Add rice"]))
        assert "Step" in output
        assert "Boil water" in output
        assert output.index("Boil water") < output.index("Add rice")

    def test_tags_table(self, service: ParseService) -> None:
        output = render_result(service.tags(["dinner", "quick"]))
        assert "Tag" in output
        assert "dinner" in output

    def test_ingredients_table_and_total(self, service: ParseService) -> None:
        output = render_result(service.ingredients(["Salt, 2.5, tsp, 0.10", "Rice, 200, g, 0.01"]))
        assert "Salt" in output
        assert "tsp" in output
        assert "2.00" in output
        assert "total_cost: 2.25" in output

    def test_price_filter_with_check(self, service: ParseService) -> None:
        output = render_result(service.price_filter("< 10", check_price=12))
        assert "price < 10" in output
        assert "matches: no" in output

    def test_sort_direction(self, service: ParseService) -> None:
        assert "order: descending" in render_result(service.sort_direction("desc"))

    def test_error_line(self, service: ParseService) -> None:
        output = render_result(service.sort_direction("up"))
        assert output.startswith("ERROR")
        assert "Neither ascending nor descending order" in output
        assert "code:" not in output

    def test_error_verbose_shows_code_and_input(self, service: ParseService) -> None:
        output = render_result(service.sort_direction("up"), verbose=True)
        assert "code: invalid_direction" in output
        assert "input: 'up'" in output

    def test_unknown_op_uses_generic_renderer(self) -> None:
        result = ServiceResult(ok=True, op="custom", data={"a": 1, "b": [1, 2]})
        output = render_result(result)
        assert "a: 1" in output
        assert "b: [1,2]" in output


class TestRenderQuiet:
    def test_items(self, service: ParseService) -> None:
        assert render_quiet(service.tags(["b", "a"])) == "a\nb"

    def test_no_canonical(self) -> None:
        assert render_quiet(ServiceResult(ok=True, op="custom")) == "OK: custom"

    def test_error(self) -> None:
        result = ServiceResult(ok=False, op="x", error=ServiceError(code="c", message="m"))
        assert render_quiet(result) == "ERROR: x — m"

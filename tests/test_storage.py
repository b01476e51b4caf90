"""
Tests for saving, loading and exporting life plans.
"""

from xml.etree import ElementTree

import pytest

from lipla.core.types import Item
from lipla.exceptions import ExportError, PlanLoadError, PlanSaveError
from lipla.storage import EXPORT_FIELDS, export_xml, load_plan, plan_to_xml, save_plan


class TestJsonStorage:
    """Test the data file round trip."""

    def test_save_and_load(self, sample_plan, tmp_path):
        sample_plan.firstname = "Ada"
        path = tmp_path / "lipla.dat"

        save_plan(sample_plan, path)
        loaded = load_plan(path)

        assert loaded == sample_plan
        assert loaded.firstname == "Ada"
        assert loaded.node(Item.ALERT, [0, 0, 0, 0]).description == "Birthday parties"
        assert loaded.goals[0].date == sample_plan.goals[0].date

    def test_load_missing_file(self, tmp_path):
        path = tmp_path / "missing.dat"
        with pytest.raises(PlanLoadError) as exc_info:
            load_plan(path)
        assert exc_info.value.filename == str(path)

    def test_load_corrupt_file(self, tmp_path):
        path = tmp_path / "corrupt.dat"
        path.write_text("not json", encoding="utf-8")
        with pytest.raises(PlanLoadError):
            load_plan(path)

    def test_load_wrong_shape(self, tmp_path):
        path = tmp_path / "wrong.dat"
        path.write_text('{"goals": "nope"}', encoding="utf-8")
        with pytest.raises(PlanLoadError):
            load_plan(path)

    def test_save_to_missing_directory(self, plan, tmp_path):
        with pytest.raises(PlanSaveError):
            save_plan(plan, tmp_path / "no" / "such" / "dir" / "lipla.dat")


class TestXmlExport:
    """Test the XML document."""

    def test_document_structure(self, sample_plan):
        root = plan_to_xml(sample_plan)

        assert root.tag == "lifePlan"
        assert [child.tag for child in root][: len(EXPORT_FIELDS)] == list(EXPORT_FIELDS)

        goals = root.findall("goal")
        assert len(goals) == 2
        assert len(goals[0].findall("result")) == 1
        actions = goals[0].findall("action")
        assert len(actions) == 2
        alert = actions[0].find("agreement").find("alert")
        assert alert is not None

    def test_records_carry_date_comment_and_description(self, sample_plan):
        goal = plan_to_xml(sample_plan).find("goal")
        comment = goal[0]
        assert comment.tag is ElementTree.Comment
        assert comment.text == sample_plan.goals[0].date
        assert comment.tail == "Lose weight"

    def test_export_writes_file(self, sample_plan, tmp_path):
        path = tmp_path / "lipla.xml"
        export_xml(sample_plan, path)

        text = path.read_text(encoding="utf-8")
        assert text.startswith("<?xml")
        assert "<lifePlan>" in text
        assert "Birthday parties" in text
        assert f"<!--{sample_plan.goals[0].date}-->" in text

    def test_export_failure(self, plan, tmp_path):
        with pytest.raises(ExportError):
            export_xml(plan, tmp_path / "no" / "dir" / "lipla.xml")

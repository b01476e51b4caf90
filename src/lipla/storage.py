"""
Reading and writing life plans.

Life plans are stored as JSON using the model field names, so a saved plan
loads back with the same records, order and timestamps. Plans can also be
exported to XML for use by other tools.
"""

from pathlib import Path
from xml.etree import ElementTree

from pydantic import ValidationError

from lipla.core.plan import Plan
from lipla.core.tree_node import TreeNode
from lipla.exceptions.core import ExportError, PlanLoadError, PlanSaveError
from lipla.logging import get_logger

logger = get_logger(__name__)

# Personal fields in the order they appear in an exported document
EXPORT_FIELDS = (
    "firstname",
    "lastname",
    "birthday",
    "address",
    "zip",
    "city",
    "country",
    "state",
    "telephone",
    "mobile",
    "email",
    "date",
    "about",
)


def load_plan(path: str | Path) -> Plan:
    """
    Read a life plan stored in JSON format.

    Params:
        path: The data file

    Returns:
        The loaded plan

    Raises:
        PlanLoadError: If the file cannot be read or does not hold a valid plan
    """
    path = Path(path)
    try:
        plan = Plan.model_validate_json(path.read_text(encoding="utf-8"))
    except (OSError, ValidationError) as e:
        raise PlanLoadError(path, type(e).__name__) from e
    logger.info("Loaded %d goals from %s", len(plan.goals), path)
    return plan


def save_plan(plan: Plan, path: str | Path) -> None:
    """
    Write a life plan in JSON format.

    Raises:
        PlanSaveError: If the file cannot be written
    """
    path = Path(path)
    try:
        path.write_text(plan.model_dump_json(indent=2), encoding="utf-8")
    except OSError as e:
        raise PlanSaveError(path, e.strerror) from e
    logger.info("Saved %d goals to %s", len(plan.goals), path)


def _record_element(tag: str, node: TreeNode) -> ElementTree.Element:
    element = ElementTree.Element(tag)
    element.append(ElementTree.Comment(node.date))
    element[-1].tail = node.description
    return element


def plan_to_xml(plan: Plan) -> ElementTree.Element:
    """
    Build the XML document of a life plan.

    Each record element carries its creation date as a comment followed by
    its description as text, and nests the records it owns.
    """
    root = ElementTree.Element("lifePlan")
    for name in EXPORT_FIELDS:
        ElementTree.SubElement(root, name).text = getattr(plan, name)
    for goal in plan.goals:
        goal_element = _record_element("goal", goal)
        for result in goal.results:
            goal_element.append(_record_element("result", result))
        for action in goal.actions:
            action_element = _record_element("action", action)
            for agreement in action.agreements:
                agreement_element = _record_element("agreement", agreement)
                for alert in agreement.alerts:
                    agreement_element.append(_record_element("alert", alert))
                action_element.append(agreement_element)
            goal_element.append(action_element)
        root.append(goal_element)
    return root


def export_xml(plan: Plan, path: str | Path) -> None:
    """
    Write a life plan in XML format.

    Raises:
        ExportError: If the file cannot be written
    """
    path = Path(path)
    tree = ElementTree.ElementTree(plan_to_xml(plan))
    ElementTree.indent(tree)
    try:
        tree.write(path, encoding="utf-8", xml_declaration=True)
    except OSError as e:
        raise ExportError(path, e.strerror) from e
    logger.info("Exported plan to %s", path)


"""Task Validator."""
from typing import Dict, Any, Optional

from pethub.models.task import TASK_FREQUENCIES, CORE_TASK_TYPES


class TaskValidator:
    """Validate pet care task input before it reaches the store."""

    @staticmethod
    def validate_frequency(frequency: Optional[str]) -> Dict[str, Any]:
        """
        Validate the task frequency.

        Args:
            frequency: daily, weekly or scheduled

        Returns:
            Dict with validation result
        """
        result = {
            "valid": True,
            "errors": [],
            "warnings": []
        }

        if frequency not in TASK_FREQUENCIES:
            result["valid"] = False
            result["errors"].append(f"Frequency must be one of: {', '.join(TASK_FREQUENCIES)}")

        return result

    @staticmethod
    def validate_type(task_type: Optional[str]) -> Dict[str, Any]:
        """Any non-empty label is a valid task type."""
        result = {
            "valid": True,
            "errors": [],
            "warnings": []
        }

        if not task_type or not isinstance(task_type, str) or not task_type.strip():
            result["valid"] = False
            result["errors"].append("Task type is required")

        return result

    @staticmethod
    def is_core_type(task_type: str) -> bool:
        return task_type in CORE_TASK_TYPES

    @staticmethod
    def resolve_description(
        task_type: str,
        description: Optional[str],
        name: Optional[str],
        strict: bool = False
    ) -> Dict[str, Any]:
        """
        Work out the stored description for a task.

        Core types always store "Crucial". Other types use the description,
        then the name. On create a missing value falls back to "Custom Task";
        on update (strict) it is an error.

        Returns:
            Dict with validation result and the resolved "description"
        """
        result = {
            "valid": True,
            "errors": [],
            "warnings": [],
            "description": None
        }

        if TaskValidator.is_core_type(task_type):
            result["description"] = "Crucial"
            return result

        text = (description or name or "").strip()
        if text:
            result["description"] = text
        elif strict:
            result["valid"] = False
            result["errors"].append("Task description or name is required for custom tasks")
        else:
            result["description"] = "Custom Task"

        return result

    @staticmethod
    def validate_task(task_data: Dict[str, Any], strict: bool = False) -> Dict[str, Any]:
        """
        Validate a full task payload.

        Args:
            task_data: Task data dictionary
            strict: apply the update rules for descriptions

        Returns:
            Dict with validation result and the resolved "description"
        """
        result = {
            "valid": True,
            "errors": [],
            "warnings": [],
            "description": None
        }

        for validation in (
            TaskValidator.validate_type(task_data.get("type")),
            TaskValidator.validate_frequency(task_data.get("frequency")),
        ):
            if not validation["valid"]:
                result["valid"] = False
                result["errors"].extend(validation["errors"])
                return result

        description = TaskValidator.resolve_description(
            task_data["type"],
            task_data.get("description"),
            task_data.get("name"),
            strict=strict
        )
        if not description["valid"]:
            result["valid"] = False
            result["errors"].extend(description["errors"])
            return result

        result["description"] = description["description"]
        return result

from enum import Enum
from typing import Any, List, Optional

from pydantic import BaseModel, Field, field_validator

from ..core.templating.variables import extract_template_variables
from .render import ValidationResult


class VariableType(str, Enum):
    """Supported template variable types."""
    STRING = "string"
    NUMBER = "number"
    SELECT = "select"
    MULTISELECT = "multiselect"
    BOOLEAN = "boolean"


class PromptRule(BaseModel):
    """Named constraint attached to a structured prompt."""
    name: str
    description: str


class PromptVariable(BaseModel):
    """Declaration of a {{variable}} used by the user template."""
    name: str
    type: VariableType = VariableType.STRING
    description: str = ""
    required: bool = True
    default: Optional[Any] = None
    options: Optional[List[str]] = None


class StructuredPrompt(BaseModel):
    """
    Provider-agnostic prompt representation.

    This is the shared input of every provider adapter. It is produced by the
    prompt-management layer and never mutated by rendering.
    """
    schema_version: int = Field(default=1, description="Structured prompt schema version")
    system: List[str] = Field(default_factory=list, description="Ordered system instructions")
    capabilities: List[str] = Field(default_factory=list, description="Informational capability tags")
    user_template: str = Field(default="", description="User message with {{variable}} placeholders")
    rules: List[PromptRule] = Field(default_factory=list)
    variables: List[PromptVariable] = Field(default_factory=list)

    @field_validator("variables", mode="before")
    @classmethod
    def coerce_variable_names(cls, v):
        # Older records list variable names only
        if isinstance(v, list):
            return [{"name": item} if isinstance(item, str) else item for item in v]
        return v

    def template_variables(self) -> List[str]:
        """Distinct variable names referenced by the user template."""
        return extract_template_variables(self.user_template)

    def get_variable(self, name: str) -> Optional[PromptVariable]:
        for variable in self.variables:
            if variable.name == name:
                return variable
        return None

    def validate_schema(self) -> ValidationResult:
        """
        Full record-level validation of the structured prompt.

        Rendering only requires a user template; this check is stricter and is
        meant for authoring and import flows.
        """
        errors: List[str] = []

        if self.schema_version < 1:
            errors.append("Schema version must be a positive number")

        if not self.system:
            errors.append("At least one system instruction is required")
        else:
            for index, instruction in enumerate(self.system):
                if not instruction or not instruction.strip():
                    errors.append(f"System instruction {index + 1} cannot be empty")

        if not self.user_template or not self.user_template.strip():
            errors.append("User template is required and cannot be empty")

        for index, rule in enumerate(self.rules):
            if not rule.name.strip():
                errors.append(f"Rule {index + 1} name is required")
            if not rule.description.strip():
                errors.append(f"Rule {index + 1} description is required")

        for variable in self.variables:
            if variable.type in (VariableType.SELECT, VariableType.MULTISELECT) and not variable.options:
                errors.append(
                    f"Variable '{variable.name}' of type '{variable.type.value}' must have options"
                )

        declared = {variable.name for variable in self.variables}
        missing = [name for name in self.template_variables() if name not in declared]
        if missing:
            errors.append(f"Template references undefined variables: {', '.join(missing)}")

        return ValidationResult.from_errors(errors)

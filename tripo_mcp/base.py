"""
MCP Tool Base Classes

Provides the common parameter declaration, validation, and error types
shared by every Tripo tool.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type

from mcp.types import Tool
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError


@dataclass
class ToolParameter:
    """Definition of a tool parameter."""
    name: str
    type: str
    description: str = ""
    required: bool = True
    min_length: Optional[int] = None
    min_items: Optional[int] = None
    items: Optional[Dict[str, Any]] = None


class MCPToolError(Exception):
    """Base exception for MCP tool errors."""
    def __init__(self, message: str, tool_name: str = None, details: Dict = None):
        self.message = message
        self.tool_name = tool_name
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(MCPToolError):
    """Raised when tool input validation fails."""
    pass


class ExecutionError(MCPToolError):
    """Raised when tool execution fails."""
    pass


def _format_pydantic_errors(exc: PydanticValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        msg = err.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts)


class MCPTool(ABC):
    """
    Abstract base class for Tripo MCP tools.

    Subclasses implement:
    - name: Tool identifier
    - description: What the tool does
    - parameters: List of ToolParameter definitions (the advertised schema)
    - request_model: pydantic model with the same fields (the validated shape)
    - execute(): Build the job description and call the API client
    """

    request_model: Type[BaseModel]

    @property
    @abstractmethod
    def name(self) -> str:
        """Unique identifier for the tool."""
        pass

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of what the tool does."""
        pass

    @property
    def parameters(self) -> List[ToolParameter]:
        """List of parameters the tool accepts."""
        return []

    @property
    def schema_extra(self) -> Dict[str, Any]:
        """Extra JSON-schema keywords merged into the input schema."""
        return {}

    @property
    def input_schema(self) -> Dict[str, Any]:
        properties: Dict[str, Dict[str, Any]] = {}
        required: List[str] = []

        for param in self.parameters:
            prop: Dict[str, Any] = {"type": param.type}
            if param.description:
                prop["description"] = param.description
            if param.type == "array" and param.items:
                prop["items"] = param.items
            if param.min_length is not None:
                prop["minLength"] = param.min_length
            if param.min_items is not None:
                prop["minItems"] = param.min_items
            properties[param.name] = prop

            if param.required:
                required.append(param.name)

        schema: Dict[str, Any] = {
            "type": "object",
            "properties": properties,
            "additionalProperties": False,
        }
        if required:
            schema["required"] = required
        schema.update(self.schema_extra)
        return schema

    def validate(self, arguments: Optional[Dict[str, Any]]) -> BaseModel:
        """
        Validate raw arguments into this tool's request model.
        Raises ValidationError if validation fails.
        """
        arguments = arguments or {}
        if not isinstance(arguments, dict):
            raise ValidationError("Arguments must be an object", tool_name=self.name)

        for param in self.parameters:
            if param.required and arguments.get(param.name) is None:
                raise ValidationError(
                    f"Missing required parameter: {param.name}",
                    tool_name=self.name
                )

        try:
            return self.request_model.model_validate(arguments)
        except PydanticValidationError as e:
            raise ValidationError(
                f"Invalid arguments for {self.name}: {_format_pydantic_errors(e)}",
                tool_name=self.name,
                details={"errors": e.errors(include_url=False)}
            ) from e

    @abstractmethod
    async def execute(self, api, request) -> Dict[str, Any]:
        """
        Execute the tool against the API client with a validated request.
        Returns the raw response mapping from the remote service.
        """
        pass

    def to_mcp_tool(self) -> Tool:
        """Convert tool to the descriptor advertised over MCP."""
        return Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_schema,
        )

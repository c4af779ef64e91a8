"""
Pydantic models for the AST of the language, matching the JSON wire format
(every node is tagged by its 'kind' field).

The evaluator treats these nodes as read-only; all models are frozen.
Scalar fields are strict: JSON "5" is not an Int and 1 is not a Bool.
"""

from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, conint


INT32_MIN = -(2 ** 31)
INT32_MAX = 2 ** 31 - 1


class BinaryOperator(str, Enum):
    ADD = "Add"
    SUB = "Sub"
    MUL = "Mul"
    DIV = "Div"
    REM = "Rem"
    EQ = "Eq"
    NEQ = "Neq"
    LT = "Lt"
    GT = "Gt"
    LTE = "Lte"
    GTE = "Gte"
    AND = "And"
    OR = "Or"


class Location(BaseModel):
    """Source span of a node. Diagnostic only."""
    model_config = ConfigDict(frozen=True)

    start: StrictInt
    end: StrictInt
    filename: StrictStr


class Parameter(BaseModel):
    """A binding name, used by function parameters and 'let'."""
    model_config = ConfigDict(frozen=True)

    text: StrictStr
    location: Optional[Location] = None


class BaseNode(BaseModel):
    """Common base for every AST node."""
    model_config = ConfigDict(frozen=True)

    location: Optional[Location] = None

    def describe(self) -> str:
        """Short label used in error messages and logs: kind plus source position."""
        kind = getattr(self, "kind", type(self).__name__)
        if self.location is None:
            return kind
        return f"{kind} at {self.location.filename}:{self.location.start}"


# --- Literals ---

class IntNode(BaseNode):
    kind: Literal["Int"] = "Int"
    value: conint(strict=True, ge=INT32_MIN, le=INT32_MAX)


class StrNode(BaseNode):
    kind: Literal["Str"] = "Str"
    value: StrictStr


class BoolNode(BaseNode):
    kind: Literal["Bool"] = "Bool"
    value: StrictBool


# --- Composite expressions ---

class BinaryNode(BaseNode):
    kind: Literal["Binary"] = "Binary"
    lhs: "Term"
    op: BinaryOperator
    rhs: "Term"


class PrintNode(BaseNode):
    kind: Literal["Print"] = "Print"
    value: "Term"


class TupleNode(BaseNode):
    kind: Literal["Tuple"] = "Tuple"
    first: "Term"
    second: "Term"


class FirstNode(BaseNode):
    kind: Literal["First"] = "First"
    value: "Term"


class SecondNode(BaseNode):
    kind: Literal["Second"] = "Second"
    value: "Term"


class VarNode(BaseNode):
    kind: Literal["Var"] = "Var"
    text: StrictStr


class CallNode(BaseNode):
    kind: Literal["Call"] = "Call"
    callee: "Term"
    arguments: List["Term"] = Field(default_factory=list)


class FunctionNode(BaseNode):
    kind: Literal["Function"] = "Function"
    parameters: List[Parameter] = Field(default_factory=list)
    value: "Term"


class LetNode(BaseNode):
    kind: Literal["Let"] = "Let"
    name: Parameter
    value: "Term"
    next: "Term"


class IfNode(BaseNode):
    kind: Literal["If"] = "If"
    condition: "Term"
    then: "Term"
    otherwise: "Term"


Term = Annotated[
    Union[
        IntNode, StrNode, BoolNode, BinaryNode, PrintNode, TupleNode,
        FirstNode, SecondNode, VarNode, CallNode, FunctionNode, LetNode, IfNode,
    ],
    Field(discriminator="kind"),
]
"""Any AST node, discriminated by 'kind'."""


class Program(BaseModel):
    """A whole program: a name (diagnostic only) and its root expression."""
    model_config = ConfigDict(frozen=True)

    name: StrictStr
    expression: Term
    location: Optional[Location] = None


for _model in (BinaryNode, PrintNode, TupleNode, FirstNode, SecondNode,
               CallNode, FunctionNode, LetNode, IfNode, Program):
    _model.model_rebuild()

# Data structures for W++ documents

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class ErrorKind(Enum):
    NO_GROUPS               = "No groups in this W++"
    NO_TYPE                 = "Group is missing a type"
    TYPE_HAS_MULTIPLE_NAMES = "Type has multiple names"
    BAD_ATTRIBUTE           = "Could not parse attribute"
    NOT_WPP                 = "Target is not W++"
    NOT_WPP_EXTENDED        = "Target is not W++ with appendix"


class WPPError(Exception):
    """
    Raised by every W++ operation that cannot produce a complete result.

    `kind` tags the failure, `value` carries the offending context
    (fragment index, type segment, raw token) or None.
    """

    def __init__(self, kind: ErrorKind, value: Any = None):
        self.kind = kind
        self.value = value
        if value is None:
            super().__init__(kind.value)
        else:
            super().__init__(f"{kind.value}: {value!r}")


@dataclass
class Attribute:
    name: str
    value: List[str] = field(default_factory=list)


@dataclass
class Node:
    """
    One parsed group:

      [Persona("Alice"){
      age("30")
      likes("cats"+"dogs")
      }]

    type="Persona", name="Alice", properties={"age": ["30"], "likes": ["cats", "dogs"]}

    Nodes are plain mutable records. Every operation clones the nodes it is
    given and returns fresh ones, so the caller owns whatever comes back and
    may change it without affecting the inputs.
    """
    type: str = ""
    name: str = ""
    properties: Dict[str, List[str]] = field(default_factory=dict)

    def copy(self) -> "Node":
        return Node(
            type=self.type,
            name=self.name,
            properties={k: list(v) for k, v in self.properties.items()},
        )


Document = List[Node]


@dataclass
class ExtendedDocument:
    wpp: Document = field(default_factory=list)
    appendix: Optional[str] = None  # free text outside groups, None when blank

"""Declaration graph for the resources a component owns.

The component describes its children as a small DAG before creating any
Pulumi resource. Ordering comes from the edges, never from the order the
declarations happen to be written in, and structural properties (who
depends on whom, what gets torn down first) can be checked without
talking to the engine.
"""

from dataclasses import dataclass
from typing import Dict, Iterator, List, Sequence, Tuple

from s3_event_pipeline.errors import (
    DependencyCycleError,
    DuplicateDeclarationError,
    UnknownDependencyError,
)


@dataclass(frozen=True)
class Declaration:
    """One child resource of a component.

    Attributes:
        name: Logical name, unique within the owner (e.g. "S3Bucket").
        resource_type: Pulumi type token of the resource.
        references: Declarations whose outputs feed this one's inputs.
        depends_on: Declarations that must be fully created first even
            though no output flows between them. These are passed to the
            engine as explicit ``depends_on`` edges.
    """

    name: str
    resource_type: str
    references: Tuple[str, ...] = ()
    depends_on: Tuple[str, ...] = ()

    @property
    def edges(self) -> Tuple[str, ...]:
        return self.references + tuple(
            d for d in self.depends_on if d not in self.references
        )


class DeclarationGraph:
    """Ownership tree of one component plus the ordering edges between its
    children."""

    def __init__(self, owner: str):
        self.owner = owner
        self._declarations: Dict[str, Declaration] = {}

    def add(
        self,
        name: str,
        resource_type: str,
        references: Sequence[str] = (),
        depends_on: Sequence[str] = (),
    ) -> Declaration:
        if name in self._declarations:
            raise DuplicateDeclarationError(
                f"{self.owner} already declares {name}"
            )
        declaration = Declaration(
            name=name,
            resource_type=resource_type,
            references=tuple(references),
            depends_on=tuple(depends_on),
        )
        self._declarations[name] = declaration
        return declaration

    def __len__(self) -> int:
        return len(self._declarations)

    def __contains__(self, name: object) -> bool:
        return name in self._declarations

    def __iter__(self) -> Iterator[Declaration]:
        return iter(self._declarations.values())

    def __getitem__(self, name: str) -> Declaration:
        return self._declarations[name]

    @property
    def names(self) -> List[str]:
        return list(self._declarations)

    def dependencies_of(self, name: str) -> Tuple[str, ...]:
        """All edges (data and explicit) leaving ``name``."""
        return self._declarations[name].edges

    def explicit_dependencies_of(self, name: str) -> Tuple[str, ...]:
        return self._declarations[name].depends_on

    def realization_order(self) -> List[Declaration]:
        """Topological order of the declarations.

        Among declarations that are ready at the same time, the one added
        first comes first, so the order is deterministic.

        Raises:
            UnknownDependencyError: If an edge points at an undeclared name.
            DependencyCycleError: If the edges form a cycle.
        """
        for declaration in self._declarations.values():
            for target in declaration.edges:
                if target not in self._declarations:
                    raise UnknownDependencyError(
                        f"{self.owner}: {declaration.name} depends on "
                        f"undeclared {target}"
                    )

        remaining = list(self._declarations.values())
        realized: Dict[str, Declaration] = {}
        while remaining:
            ready = next(
                (
                    d
                    for d in remaining
                    if all(target in realized for target in d.edges)
                ),
                None,
            )
            if ready is None:
                stuck = ", ".join(d.name for d in remaining)
                raise DependencyCycleError(
                    f"{self.owner}: cycle between {stuck}"
                )
            realized[ready.name] = ready
            remaining.remove(ready)
        return list(realized.values())

    def teardown_order(self) -> List[Declaration]:
        """Order in which children are removed: dependents before the
        resources they depend on."""
        return list(reversed(self.realization_order()))

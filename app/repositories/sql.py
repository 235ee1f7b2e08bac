"""Parameterized SQL clause builders shared by the raw-SQL repositories.

Two pure helpers live here:

- ``UpdateClauseBuilder`` turns a sparse update payload into a ``SET`` clause.
- ``FilterClauseBuilder`` turns sparse filter criteria into a ``WHERE`` clause
  from an ordered predicate table.

Identifiers only ever come from the closed vocabulary of payload keys, the
field-name maps and the predicate tables below. User data travels exclusively
through the returned ``values`` and is bound by the driver.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional, Sequence, Tuple

from app.services.exceptions import EmptyInputError

Placeholder = Callable[[int], str]

PARAM_PREFIX = "p"


def dollar_placeholder(index: int) -> str:
    """PostgreSQL positional style: ``$1``, ``$2``, ..."""
    return f"${index}"


def named_placeholder(index: int) -> str:
    """SQLAlchemy ``text()`` style: ``:p1``, ``:p2``, ..."""
    return f":{PARAM_PREFIX}{index}"


def param_name(index: int) -> str:
    return f"{PARAM_PREFIX}{index}"


@dataclass(frozen=True)
class SqlClause:
    """A SQL fragment plus the values bound to its placeholders.

    ``values[N - 1]`` binds placeholder ``N``; ``columns[N - 1]`` is the
    storage column that value is compared with or written to.
    """

    clause: str
    values: Tuple[Any, ...] = ()
    columns: Tuple[str, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.clause)

    def bind_params(self, start: int = 1) -> Dict[str, Any]:
        """Values keyed by the names ``named_placeholder`` renders."""
        return {param_name(i): v for i, v in enumerate(self.values, start=start)}

    def bind_columns(self, start: int = 1) -> Dict[str, str]:
        return {param_name(i): c for i, c in enumerate(self.columns, start=start)}


class UpdateClauseBuilder:
    """Build the ``SET`` clause of a partial update.

    {"firstName": "Aliya", "age": 32} with {"firstName": "first_name"}
    => clause "first_name = $1, age = $2", values ("Aliya", 32)
    """

    def __init__(self, placeholder: Placeholder = dollar_placeholder):
        self.placeholder = placeholder

    def build(
        self,
        payload: Mapping[str, Any],
        field_name_map: Optional[Mapping[str, str]] = None,
    ) -> SqlClause:
        """Map ``payload`` (in insertion order) to ``column = $N`` fragments.

        Raises:
            EmptyInputError: if ``payload`` has no keys
        """
        if not payload:
            raise EmptyInputError()

        field_name_map = field_name_map or {}
        fragments = []
        columns = []
        for index, key in enumerate(payload, start=1):
            column = field_name_map.get(key, key)
            fragments.append(f"{column} = {self.placeholder(index)}")
            columns.append(column)

        return SqlClause(
            clause=", ".join(fragments),
            values=tuple(payload.values()),
            columns=tuple(columns),
        )


def _always(_value: Any) -> bool:
    return True


def _identity(value: Any) -> Any:
    return value


@dataclass(frozen=True)
class FilterPredicate:
    """One entry of a predicate table.

    ``template`` contains a single ``{}`` which receives the rendered
    placeholder. ``applies`` decides whether a present value contributes a
    predicate at all; ``transform`` produces the bound value.
    """

    key: str
    column: str
    template: str
    transform: Callable[[Any], Any] = _identity
    applies: Callable[[Any], bool] = _always


def contains(value: str) -> str:
    return f"%{value}%"


def is_true(value: Any) -> bool:
    return value is True


def zero(_value: Any) -> int:
    return 0


class FilterClauseBuilder:
    """Build a conjunctive ``WHERE`` clause from an ordered predicate table.

    Predicates are evaluated in table order, not criteria order, so the same
    criteria always produce the same clause. Keys that the table does not
    know about are ignored, ``None`` counts as absent.
    """

    def __init__(
        self,
        predicates: Sequence[FilterPredicate],
        placeholder: Placeholder = dollar_placeholder,
    ):
        self.predicates = tuple(predicates)
        self.placeholder = placeholder

    def build(self, criteria: Optional[Mapping[str, Any]] = None) -> SqlClause:
        if not criteria:
            return SqlClause(clause="")

        fragments = []
        values = []
        columns = []
        for predicate in self.predicates:
            if predicate.key not in criteria:
                continue
            raw = criteria[predicate.key]
            if raw is None or not predicate.applies(raw):
                continue
            fragments.append(predicate.template.format(self.placeholder(len(values) + 1)))
            values.append(predicate.transform(raw))
            columns.append(predicate.column)

        return SqlClause(
            clause=" AND ".join(fragments),
            values=tuple(values),
            columns=tuple(columns),
        )


# Public name -> storage column, only where they differ.
JOB_FIELD_NAME_MAP: Mapping[str, str] = MappingProxyType({})

COMPANY_FIELD_NAME_MAP: Mapping[str, str] = MappingProxyType({
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
})

JOB_FILTER_PREDICATES: Tuple[FilterPredicate, ...] = (
    FilterPredicate("title", "title", "LOWER(title) LIKE LOWER({})", transform=contains),
    FilterPredicate("minSalary", "salary", "salary >= {}"),
    FilterPredicate("hasEquity", "equity", "equity > {}", transform=zero, applies=is_true),
)

COMPANY_FILTER_PREDICATES: Tuple[FilterPredicate, ...] = (
    FilterPredicate("nameLike", "name", "LOWER(name) LIKE LOWER({})", transform=contains),
    FilterPredicate("minEmployees", "num_employees", "num_employees >= {}"),
    FilterPredicate("maxEmployees", "num_employees", "num_employees <= {}"),
)

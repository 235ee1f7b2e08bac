import pytest

from app.repositories.sql import (
    COMPANY_FIELD_NAME_MAP,
    COMPANY_FILTER_PREDICATES,
    JOB_FIELD_NAME_MAP,
    JOB_FILTER_PREDICATES,
    FilterClauseBuilder,
    UpdateClauseBuilder,
    named_placeholder,
)
from app.services.exceptions import EmptyInputError


update_clause = UpdateClauseBuilder()
job_filters = FilterClauseBuilder(JOB_FILTER_PREDICATES)
company_filters = FilterClauseBuilder(COMPANY_FILTER_PREDICATES)


# --- UpdateClauseBuilder ---

def test_update_clause_translates_mapped_names():
    result = update_clause.build({"firstName": "Aliya", "age": 32}, {"firstName": "first_name"})
    assert result.clause == "first_name = $1, age = $2"
    assert result.values == ("Aliya", 32)
    assert result.columns == ("first_name", "age")


def test_update_clause_single_field():
    result = update_clause.build({"title": "New"}, JOB_FIELD_NAME_MAP)
    assert result.clause == "title = $1"
    assert result.values == ("New",)


def test_update_clause_follows_payload_order():
    result = update_clause.build({"salary": 5, "title": "t", "equity": "0.1"}, JOB_FIELD_NAME_MAP)
    assert result.clause == "salary = $1, title = $2, equity = $3"
    assert result.values == (5, "t", "0.1")


def test_update_clause_is_deterministic():
    payload = {"name": "Acme", "numEmployees": 10, "logoUrl": "http://x"}
    first = update_clause.build(payload, COMPANY_FIELD_NAME_MAP)
    second = update_clause.build(dict(payload), COMPANY_FIELD_NAME_MAP)
    assert first == second
    assert first.clause == "name = $1, num_employees = $2, logo_url = $3"


def test_update_clause_without_map_uses_keys():
    result = update_clause.build({"a": 1, "b": None})
    assert result.clause == "a = $1, b = $2"
    assert result.values == (1, None)


@pytest.mark.parametrize("field_name_map", [None, {}, {"x": "y"}])
def test_update_clause_empty_payload_raises(field_name_map):
    with pytest.raises(EmptyInputError) as exc_info:
        update_clause.build({}, field_name_map)
    assert exc_info.value.message == "No data"
    assert exc_info.value.http_status == 400


def test_update_clause_values_never_reach_clause():
    hostile = "x'; DROP TABLE jobs; --"
    result = update_clause.build({"title": hostile})
    assert hostile not in result.clause
    assert result.values == (hostile,)


def test_update_clause_named_placeholders():
    builder = UpdateClauseBuilder(placeholder=named_placeholder)
    result = builder.build({"numEmployees": 3, "name": "C"}, COMPANY_FIELD_NAME_MAP)
    assert result.clause == "num_employees = :p1, name = :p2"
    assert result.bind_params() == {"p1": 3, "p2": "C"}
    assert result.bind_columns() == {"p1": "num_employees", "p2": "name"}


def test_field_name_maps_are_read_only():
    with pytest.raises(TypeError):
        COMPANY_FIELD_NAME_MAP["handle"] = "other"


# --- FilterClauseBuilder ---

@pytest.mark.parametrize("criteria", [None, {}])
def test_filter_clause_without_criteria_is_empty(criteria):
    result = job_filters.build(criteria)
    assert result.clause == ""
    assert result.values == ()
    assert not result


def test_filter_clause_title_is_case_insensitive_substring():
    result = job_filters.build({"title": "net"})
    assert result.clause == "LOWER(title) LIKE LOWER($1)"
    assert result.values == ("%net%",)


def test_filter_clause_min_salary():
    result = job_filters.build({"minSalary": 100})
    assert result.clause == "salary >= $1"
    assert result.values == (100,)


def test_filter_clause_has_equity_true_binds_zero():
    result = job_filters.build({"hasEquity": True})
    assert result.clause == "equity > $1"
    assert result.values == (0,)


def test_filter_clause_has_equity_false_contributes_nothing():
    result = job_filters.build({"hasEquity": False})
    assert result.clause == ""
    assert result.values == ()


def test_filter_clause_all_predicates_in_fixed_order():
    expected = "LOWER(title) LIKE LOWER($1) AND salary >= $2 AND equity > $3"
    forward = job_filters.build({"title": "j", "minSalary": 1500, "hasEquity": True})
    backward = job_filters.build({"hasEquity": True, "minSalary": 1500, "title": "j"})
    assert forward.clause == backward.clause == expected
    assert forward.values == backward.values == ("%j%", 1500, 0)


def test_filter_clause_numbers_placeholders_consecutively():
    result = job_filters.build({"title": "j", "hasEquity": True})
    assert result.clause == "LOWER(title) LIKE LOWER($1) AND equity > $2"
    assert result.values == ("%j%", 0)


def test_filter_clause_ignores_unknown_keys_and_none():
    result = job_filters.build({"companyHandle": "c1", "title": None, "minSalary": 0})
    assert result.clause == "salary >= $1"
    assert result.values == (0,)


def test_filter_clause_shape_independent_of_hostile_values():
    hostile = job_filters.build({"title": "%' OR '1'='1"})
    plain = job_filters.build({"title": "plain"})
    assert hostile.clause == plain.clause
    assert hostile.values == ("%%' OR '1'='1%",)


def test_company_filter_bounds_share_a_column():
    result = company_filters.build({"maxEmployees": 10, "minEmployees": 2, "nameLike": "ac"})
    assert result.clause == (
        "LOWER(name) LIKE LOWER($1) AND num_employees >= $2 AND num_employees <= $3"
    )
    assert result.values == ("%ac%", 2, 10)
    assert result.columns == ("name", "num_employees", "num_employees")


def test_filter_clause_named_placeholders_bind_by_name():
    builder = FilterClauseBuilder(JOB_FILTER_PREDICATES, placeholder=named_placeholder)
    result = builder.build({"minSalary": 10, "hasEquity": True})
    assert result.clause == "salary >= :p1 AND equity > :p2"
    assert result.bind_params() == {"p1": 10, "p2": 0}
    assert result.bind_columns() == {"p1": "salary", "p2": "equity"}

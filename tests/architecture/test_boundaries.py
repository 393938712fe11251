from pytest_archon import archrule


def test_filters_are_backend_agnostic() -> None:
    """
    Filter variants only build predicate trees. They must not know about
    concrete query builders or SQLAlchemy.
    """
    (
        archrule("filters_backend_agnostic")
        .match("cqrs_ddd_request_filters.filters*")
        .should_not_import("cqrs_ddd_request_filters.adapters*")
        .should_not_import("sqlalchemy*")
        .check("cqrs_ddd_request_filters", only_direct_imports=True)
    )


def test_engines_do_not_depend_on_orchestrator() -> None:
    """
    Filterable and Sortable sit below FilteredQuery and must stay usable
    without it.
    """
    (
        archrule("engines_below_orchestrator")
        .match("cqrs_ddd_request_filters.filterable")
        .match("cqrs_ddd_request_filters.sortable")
        .should_not_import("cqrs_ddd_request_filters.query")
        .should_not_import("cqrs_ddd_request_filters.adapters*")
        .check("cqrs_ddd_request_filters", only_direct_imports=True)
    )


def test_predicate_model_is_a_leaf() -> None:
    """Operators and the Where tree depend on nothing else in the package."""
    (
        archrule("predicate_model_leaf")
        .match("cqrs_ddd_request_filters.operators")
        .match("cqrs_ddd_request_filters.wheres")
        .should_not_import("cqrs_ddd_request_filters.filters*")
        .should_not_import("cqrs_ddd_request_filters.filterable")
        .should_not_import("cqrs_ddd_request_filters.sortable")
        .should_not_import("cqrs_ddd_request_filters.requests")
        .check("cqrs_ddd_request_filters")
    )


def test_sqlalchemy_confined_to_adapter() -> None:
    (
        archrule("sqlalchemy_confined")
        .match("cqrs_ddd_request_filters*")
        .exclude("cqrs_ddd_request_filters.adapters.sqlalchemy")
        .should_not_import("sqlalchemy*")
        .check("cqrs_ddd_request_filters")
    )

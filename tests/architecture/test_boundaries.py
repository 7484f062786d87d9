from pytest_archon import archrule


def test_query_encoding_is_independent() -> None:
    """
    The accumulated query is a leaf: it knows nothing about records,
    kinds or options.
    """
    (
        archrule("query_is_leaf")
        .match("query_stringify.query")
        .should_not_import("query_stringify.fields")
        .should_not_import("query_stringify.kinds")
        .should_not_import("query_stringify.options")
        .should_not_import("query_stringify.serializer")
        .check("query_stringify")
    )


def test_conversion_does_not_depend_on_entry_points() -> None:
    """
    Value conversion must not reach back into introspection or the
    serializer that drives it.
    """
    (
        archrule("kinds_independence")
        .match("query_stringify.kinds")
        .should_not_import("query_stringify.fields")
        .should_not_import("query_stringify.serializer")
        .check("query_stringify")
    )


def test_options_isolation() -> None:
    """Options are plain values and import nothing else from the package."""
    (
        archrule("options_isolation")
        .match("query_stringify.options")
        .should_not_import("query_stringify.fields")
        .should_not_import("query_stringify.kinds")
        .should_not_import("query_stringify.serializer")
        .check("query_stringify")
    )


def test_introspection_does_not_depend_on_serializer() -> None:
    (
        archrule("fields_layering")
        .match("query_stringify.fields")
        .should_not_import("query_stringify.serializer")
        .check("query_stringify")
    )

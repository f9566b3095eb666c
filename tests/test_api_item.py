"""Tests for the in-memory API model."""

from apidoc_html.api_item import ApiItem, ApiItemKind


def test_members_link_back_to_parent() -> None:
    """Verify parent links for constructor and add_member children."""
    method = ApiItem(kind=ApiItemKind.METHOD, display_name="run")
    cls = ApiItem(kind=ApiItemKind.CLASS, display_name="Task", members=[method])
    assert method.parent is cls

    prop = cls.add_member(ApiItem(kind=ApiItemKind.PROPERTY, display_name="name"))
    assert prop.parent is cls
    assert cls.members == [method, prop]


def test_hierarchy_and_scoped_name() -> None:
    """Verify the root-to-item chain and the name below the entry point."""
    model = ApiItem(kind=ApiItemKind.MODEL, display_name="")
    package = model.add_member(
        ApiItem(kind=ApiItemKind.PACKAGE, display_name="@scope/widgets"),
    )
    entry_point = package.add_member(
        ApiItem(kind=ApiItemKind.ENTRY_POINT, display_name=""),
    )
    cls = entry_point.add_member(ApiItem(kind=ApiItemKind.CLASS, display_name="Widget"))
    method = cls.add_member(ApiItem(kind=ApiItemKind.METHOD, display_name="doThing"))

    assert method.get_hierarchy() == [model, package, entry_point, cls, method]
    assert method.get_scoped_name_within_package() == "Widget.doThing"
    assert cls.get_scoped_name_within_package() == "Widget"
    assert package.get_scoped_name_within_package() == "@scope/widgets"
    assert package.entry_points == [entry_point]


def test_excerpt_with_modifiers() -> None:
    """Verify that modifiers prefix the declaration excerpt."""
    item = ApiItem(
        kind=ApiItemKind.METHOD,
        display_name="create",
        excerpt="create(): Widget;",
        modifiers=["static"],
    )
    assert item.get_excerpt_with_modifiers() == "static create(): Widget;"
    item.modifiers = []
    assert item.get_excerpt_with_modifiers() == "create(): Widget;"


def test_parameterized_kinds() -> None:
    """Verify which kinds carry parameter lists."""
    assert ApiItem(kind=ApiItemKind.CONSTRUCTOR, display_name="c").is_parameterized
    assert ApiItem(kind="MethodSignature", display_name="m").is_parameterized
    assert not ApiItem(kind=ApiItemKind.PROPERTY, display_name="p").is_parameterized

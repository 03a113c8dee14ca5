"""Lightweight element tree describing how a node view is rendered."""

from typing import Dict, List


class RenderedElement:
    """
    A rendered element: a tag with classes, attributes, text and children.

    The host maps these onto whatever its view layer draws with.
    """

    def __init__(self, tag: str, classes: List[str] | None = None, editable: bool = True) -> None:
        """
        Initialize an element.

        Args:
            tag: Element tag name, e.g. "h2" or "span"
            classes: Initial CSS classes
            editable: Whether the user can place the cursor inside the element
        """
        self.tag = tag
        self.classes: List[str] = []
        self.attributes: Dict[str, str] = {}
        self.children: List["RenderedElement"] = []
        self.text = ""
        self.editable = editable

        for css_class in classes or []:
            self.add_class(css_class)

    def add_class(self, css_class: str) -> None:
        """Add a CSS class if not already present."""
        if css_class not in self.classes:
            self.classes.append(css_class)

    def remove_class(self, css_class: str) -> None:
        """Remove a CSS class if present."""
        if css_class in self.classes:
            self.classes.remove(css_class)

    def has_class(self, css_class: str) -> bool:
        """Check whether a CSS class is present."""
        return css_class in self.classes

    def set_attribute(self, name: str, value: str) -> None:
        """Set an attribute."""
        self.attributes[name] = value

    def append_child(self, child: "RenderedElement") -> "RenderedElement":
        """
        Append a child element.

        Args:
            child: The element to append

        Returns:
            The appended element
        """
        self.children.append(child)
        return child

    def __repr__(self) -> str:
        classes = f" class={' '.join(self.classes)!r}" if self.classes else ""
        return f"<RenderedElement {self.tag}{classes}>"

"""
    cssvalues.structures
    --------------------

    A minimal element tree, enough for the helpers in
    :mod:`cssvalues.boxes`.

    Any object with ``get_css()`` and ``get_previous_sibling()`` can be used
    in place of :class:`Tag`.

    :copyright: (c) 2010 by Simon Sapin.
    :license: BSD, see LICENSE for more details.
"""


class NoSiblingError(LookupError):
    """Raised when an element has no previous sibling."""


class Tag:
    """An element with its already resolved style.

    .. attribute:: name

        The element name, eg. ``'p'``.

    .. attribute:: css

        A dict of property names to value strings.

    .. attribute:: parent

        The parent :class:`Tag`, or ``None`` for a root.

    .. attribute:: children

        The list of child tags, in document order.

    """
    def __init__(self, name, css=None, parent=None):
        self.name = name
        self.css = dict(css or {})
        self.parent = None
        self.children = []
        if parent is not None:
            parent.append(self)

    def __repr__(self):  # pragma: no cover
        return '<{0.__class__.__name__} {0.name} {0.css}>'.format(self)

    def append(self, child):
        """Add ``child`` as the last child of this tag and return it.

        ``child`` is first removed from its previous parent, if any.

        """
        if child.parent is not None:
            child.parent.children = [
                tag for tag in child.parent.children if tag is not child]
        child.parent = self
        self.children.append(child)
        return child

    def get_css(self):
        return self.css

    def get_previous_sibling(self):
        """Return the tag just before this one in its parent.

        :raises: :class:`NoSiblingError` for a root or a first child.

        """
        if self.parent is None:
            raise NoSiblingError('{0} has no parent'.format(self.name))
        siblings = self.parent.children
        index = next(
            (i for i, sibling in enumerate(siblings) if sibling is self),
            None)
        if index is None:
            raise NoSiblingError(
                '{0} is not a child of {1}'.format(
                    self.name, self.parent.name))
        if index == 0:
            raise NoSiblingError(
                '{0} is the first child of {1}'.format(
                    self.name, self.parent.name))
        return siblings[index - 1]

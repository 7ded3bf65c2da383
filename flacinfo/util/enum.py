# This program is free software; you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 2 of the License, or
# (at your option) any later version.


def enum(cls):
    """Class decorator for closed enum types::

        @enum
        class BlockType(int):
            STREAMINFO = 0
            PADDING = 1

    Result is a subclass of the first base and all upper case attributes
    are instances of it. ``values`` holds every known value,
    ``value_of()`` maps a raw value to its instance and raises ValueError
    for unknown ones, ``name`` gives the attribute name of an instance.
    """

    type_ = cls.__bases__[0]

    d = dict(cls.__dict__)
    d.pop("__dict__", None)
    d.pop("__weakref__", None)
    new_type = type(cls.__name__, (type_,), d)
    new_type.__module__ = cls.__module__

    map_ = {}
    instances = {}
    for key, value in d.items():
        if key.upper() == key and not key.startswith("_"):
            value_instance = new_type(value)
            setattr(new_type, key, value_instance)
            map_[value] = key
            instances[value] = value_instance
    new_type.values = frozenset(map_.keys())

    def value_of(cls, value):
        try:
            return instances[value]
        except (KeyError, TypeError):
            raise ValueError(
                "%r is not a valid %s (try %s)" % (
                    value, cls.__name__, sorted(cls.values))) from None
    new_type.value_of = classmethod(value_of)

    def name(self):
        return map_.get(self, str(type_(self)))
    new_type.name = property(name)

    def repr_(self):
        name = type(self).__name__
        try:
            return "%s.%s" % (name, map_[self])
        except KeyError:
            return "%s(%s)" % (name, type_(self))

    new_type.__repr__ = repr_

    return new_type

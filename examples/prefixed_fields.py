from aspect_attributes import define_attribute, update_attributes


def prefixed(self, value, options):
    return f"{options['prefix']}-{str(value).strip()}"


class Thing:
    pass


define_attribute(Thing, "foo", prefix="Foo", transform=prefixed)
define_attribute(Thing, "bar", {"prefix": "Bar"}, prefixed)

thing = update_attributes(Thing(), foo="  Thing  ", bar="   Thingy")
result = (thing.foo, thing.bar)

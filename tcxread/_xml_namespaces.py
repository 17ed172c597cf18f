# XML namespaces used when reading TCX files. Elements are matched by local name, so only the namespace of the
# attribute that selects the concrete type of a polymorphic element is needed.

XSI_NAMESPACE = 'http://www.w3.org/2001/XMLSchema-instance'

# Clark notation for the xsi:type attribute.
XSI_TYPE = '{%s}type' % XSI_NAMESPACE

# What the attribute is called if a document uses the "xsi" prefix without declaring it.
UNBOUND_XSI_TYPE = 'xsi:type'

"""Dependency-injection and method-filtering constants.

These closed sets decide which fields of a class count as injected
collaborators and which public methods are skipped when collecting the
operations to test.
"""

# =============================================================================
# Injection Markers
# =============================================================================
# A field carrying any of these annotations is treated as an injected
# dependency and gets a @Mock in the generated test. Names are fully
# qualified; add to this set to recognize another container's marker.

INJECTION_MARKERS = frozenset(
    {
        "org.springframework.beans.factory.annotation.Autowired",
        "javax.inject.Inject",
        "jakarta.inject.Inject",
        "javax.annotation.Resource",
        "jakarta.annotation.Resource",
    }
)

# =============================================================================
# Universal Object Methods
# =============================================================================
# Methods every Java object inherits. Overriding them in a service is
# infrastructure, not behaviour, so they never produce tests.

OBJECT_METHOD_NAMES = frozenset(
    {
        "toString",
        "hashCode",
        "equals",
        "clone",
        "finalize",
        "getClass",
        "notify",
        "notifyAll",
        "wait",
    }
)

# =============================================================================
# Type Sentinels
# =============================================================================

VOID_TYPE = "void"

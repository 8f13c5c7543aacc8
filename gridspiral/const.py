from enum import Enum, IntEnum


class Metric(Enum):
    """The distance function which shapes a spiral's rings."""
    CHEBYSHEV = "chebyshev"  # squares
    MANHATTAN = "manhattan"  # diamonds
    EUCLIDEAN = "euclidean"  # circles, more or less


class Leg(Enum):
    """
    The edge of a square or diamond ring which an iterator is tracing.

    Legs are walked in this order; ``CENTER`` happens once, ``DONE`` is
    final.
    """
    CENTER = 0
    RIGHT = 1
    TOP = 2
    LEFT = 3
    BOTTOM = 4
    DONE = 5


class Octant(IntEnum):
    """
    Which reflection of a canonical point (x,y) with 0 ≤ x ≤ y is emitted
    next.
    """
    XY = 0  # ( x, y)
    XnY = 1  # ( x,-y)
    nXY = 2  # (-x, y)
    nXnY = 3  # (-x,-y)
    YX = 4  # ( y, x)
    YnX = 5  # ( y,-x)
    nYX = 6  # (-y, x)
    nYnX = 7  # (-y,-x)

    ADVANCE = 8  # step to the next canonical point
    DONE = 9

    def reflect(self, x, y):
        if self is Octant.XY:
            return x, y
        if self is Octant.XnY:
            return x, -y
        if self is Octant.nXY:
            return -x, y
        if self is Octant.nXnY:
            return -x, -y
        if self is Octant.YX:
            return y, x
        if self is Octant.YnX:
            return y, -x
        if self is Octant.nYX:
            return -y, x
        if self is Octant.nYnX:
            return -y, -x
        raise ValueError("%s is not a reflection" % (self.name,))

REFLECTIONS = tuple(Octant(i) for i in range(8))


# Semi-singleton return codes for spiral searches.
# The check functions return these classes. If a wrapper needs to
# modify them, it calls the class (returning a modifyable object) with
# the attr(s) it wants to affect. If another wrapper does the same, it
# calls the object, which returns self.

class _Signal:
    signal = False
    # this is a result

    done = False
    # stop scanning entirely


    def __init__(self, **kw):
        self(**kw)

    def __call__(self, **kw):
        for k,v in kw.items():
            setattr(self,k,v)
        return self

class Continue(_Signal):
    pass

class SignalThis(_Signal):
    """this point matches"""
    signal = True

class SignalDone(_Signal):
    """This is it, don't bother searching further"""
    signal = True
    done = True

class AllDone(_Signal):
    """This is not it, but don't bother searching further"""
    done = True

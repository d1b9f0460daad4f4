from .errors import ParamError
from .curve import (SplineFamily, eval_curve, check_poles,
                    linear, quadratic_bezier, cubic_bezier, catmull_rom, cubic_bspline_basis)
from .derivative import cubic_bezier_diff, cubic_bezier_diff2, cubic_bezier_curvature
from .frame import tangent_at, normal_at, tangent_line, normal_line
from .parametric import Curve
from .sampling import sample_polyline, sample_frames

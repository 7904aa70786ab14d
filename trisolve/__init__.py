from .errors import (
    GeometryError,
    MalformedName,
    MalformedSideName,
    MalformedTriangleName,
    UnknownVertex,
    ConflictingConstraint,
    InvalidAngle,
    InvalidLength,
    Degenerate,
    DegenerateLine,
)
from .types import Point, VertexSet, Line, SideConstraint, TriangleStyle
from .names import parse_triangle_name, resolve_side, split_vertex_names
from .validate import (
    check_angle_range,
    check_positive_length,
    check_triangle_inequality,
    validate_vertex_set,
)
from .solver import (
    SolverConfig,
    circle_intersections,
    get_solver_config,
    locate_vertex,
    set_side_lengths,
    set_solver_config,
    side_length,
)
from .transforms import (
    centroid,
    copy_vertex_set,
    normalize_into_margin,
    reflect,
    rotate,
    scale,
    translate,
    translate_point,
)
from .constructions import default_vertex_set, from_aas, from_asa, from_hl, from_sas, from_sss
from .triangle import Triangle

__all__ = [
    'GeometryError',
    'MalformedName',
    'MalformedSideName',
    'MalformedTriangleName',
    'UnknownVertex',
    'ConflictingConstraint',
    'InvalidAngle',
    'InvalidLength',
    'Degenerate',
    'DegenerateLine',
    'Point',
    'VertexSet',
    'Line',
    'SideConstraint',
    'TriangleStyle',
    'parse_triangle_name',
    'resolve_side',
    'split_vertex_names',
    'check_angle_range',
    'check_positive_length',
    'check_triangle_inequality',
    'validate_vertex_set',
    'SolverConfig',
    'circle_intersections',
    'get_solver_config',
    'locate_vertex',
    'set_side_lengths',
    'set_solver_config',
    'side_length',
    'centroid',
    'copy_vertex_set',
    'normalize_into_margin',
    'reflect',
    'rotate',
    'scale',
    'translate',
    'translate_point',
    'default_vertex_set',
    'from_aas',
    'from_asa',
    'from_hl',
    'from_sas',
    'from_sss',
    'Triangle',
]

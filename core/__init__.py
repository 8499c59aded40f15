"""Core image separation utilities."""
from .errors import SeparatorError, InvalidArgument, DecodeError, EncodeError
from .image_utils import load_image, save_image, has_writer
from .splitting import SeparatedParts, separate, reassemble, compute_boundaries

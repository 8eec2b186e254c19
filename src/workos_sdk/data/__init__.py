# Licensed under the MIT license.

"""Internal request plumbing for the WorkOS SDK."""

__all__ = []

"""
Document stores: plain functions taking the database handle, the caller id
and validated input, returning serialized documents or raising an AppError.
"""

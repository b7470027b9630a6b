"""
Run-scoped core of data_export: the execution context, its error types and
the single-run pipeline that drives it.
"""

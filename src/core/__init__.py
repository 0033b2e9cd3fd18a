"""Core domain package for log-scanner.

Core contains pattern compilation and line classification without any file,
console, or HTTP specific code, keeping the matching logic portable.
"""

"""
Only the root tests directory carries an __init__.py; subdirectories are
namespace packages (PEP 420). This keeps pytest treating tests/ as one package
and gives stable imports, so test module basenames must stay unique.
"""

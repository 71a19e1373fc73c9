# Tests import the package as `src.layerconf`; pytest puts this directory on
# sys.path because this conftest lives at the repository root.

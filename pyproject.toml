[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphml-viewer"
version = "0.2.0"
description = "Load simple GraphML files, lay them out with a force-directed algorithm and view them in a window"
requires-python = ">=3.10"
dependencies = []
keywords = ["graphml", "graph", "viewer", "force-directed", "layout", "visualization"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
visualize-graph = "graphml_viewer.ui:main"

[tool.hatch.build.targets.wheel]
packages = ["graphml_viewer"]

[tool.pytest.ini_options]
addopts = "-ra"

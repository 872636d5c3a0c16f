[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sphereview"
version = "1.0.0"
description = "Interactive viewer that draws a cloud of spheres read from a plain-text coordinate file"
requires-python = ">=3.10"
dependencies = []
keywords = ["visualization", "spheres", "point cloud", "3d", "viewer", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Environment :: MacOS X",
    "Environment :: Win32 (MS Windows)",
    "Intended Audience :: Science/Research",
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
sphereview = "sphereview.app:main"

[tool.hatch.build.targets.wheel]
packages = ["sphereview"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

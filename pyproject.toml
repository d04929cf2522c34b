[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gltfxform"
version = "0.1.0"
description = "glTF node transforms, small 3D math types and vertex index/joint readers"
requires-python = ">=3.10"
dependencies = []
keywords = ["gltf", "3d", "transform", "quaternion", "matrix", "mesh", "skin"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Modeling",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gltfxform"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "chromakit"
version = "1.4.4"
description = "Building blocks for audio fingerprinting: URL-safe base64, 3- and 5-bit packing, smoothing filters and a rolling integral image"
requires-python = ">=3.10"
dependencies = []
keywords = ["audio", "fingerprint", "base64", "bit-packing", "integral-image", "gaussian-filter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Analysis",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[tool.hatch.build.targets.wheel]
packages = ["chromakit"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true

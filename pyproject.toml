[build-system]
requires = ["setuptools>=61.0"]
build-backend = "setuptools.build_meta"

[project]
name = "clinicdesk"
version = "1.0.0"
description = "Clinic front-desk records for receptionists, examination rooms and test services, kept in delimited text files."
requires-python = ">=3.10"
dependencies = []
keywords = ["clinic", "hospital", "records", "repository", "text-storage"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Healthcare Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.setuptools.packages.find]
include = ["clinicdesk*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

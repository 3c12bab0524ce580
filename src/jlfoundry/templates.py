"""The fixed set of files emitted for a new Julia package.

Each :class:`Template` pairs a relative path with a content pattern. Both are
rendered by :class:`~jlfoundry.template.TemplateRenderer` against the context
returned by :func:`template_context`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

from .config import ProjectConfig
from .template import TemplateRenderer, yaml_scalar

__all__ = [
    "PROJECT_DIRECTORIES",
    "TEMPLATES",
    "Template",
    "get_template",
    "render_path",
    "render_template",
    "template_context",
]


PROJECT_DIRECTORIES: tuple[str, ...] = ("src", "test", "docs/src", ".github/workflows")

README_TEMPLATE = """# {{ name }}

{{ summary }}

## Installation

```julia
import Pkg
Pkg.add("{{ name }}")
```

## Usage

```julia
using {{ name }}
```

## Development

### Running tests

```bash
make test
```

### Running linter

```bash
make lint
```

### Building documentation

```bash
make docs
```

## License

MIT License. See LICENSE file for details.
"""

AGENTS_TEMPLATE = """# AGENTS.md

Conventions for automated agents and contributors working with this repository.

## Code Style

- Follow the Julia style guide: https://docs.julialang.org/en/v1/manual/style-guide/
- Use 4 spaces for indentation
- Use descriptive variable names
- Write docstrings for exported functions

## Testing

- All exported functions must have tests
- Tests are in the `test/` directory
- Run tests with `make test` or `julia --project test/runtests.jl`

## Linting and Formatting

- Use `make lint` to run JuliaFormatter
- Use `make format` to auto-format code
- Ensure no linting errors before committing

## Documentation

- Documentation is built with Documenter.jl
- Run `make docs` to generate the documentation locally
- Documentation sources are in the `docs/` directory

## Commit Messages

- Use conventional commits: feat, fix, docs, style, refactor, test, chore
- Keep commits focused and atomic
- Reference issue numbers when applicable

## Pull Requests

- Ensure all tests pass
- Update documentation as needed
- Keep PRs small and focused
"""

LICENSE_TEMPLATE = """MIT License

Copyright (c) {{ year }} {{ author_name }}

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in all
copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
SOFTWARE.
"""

# Recipe lines must start with a tab.
MAKEFILE_TEMPLATE = (
    ".PHONY: help test lint format docs clean install dev\n"
    "\n"
    "help:\n"
    '\t@echo "Available targets:"\n'
    '\t@echo "  install    - Install dependencies"\n'
    '\t@echo "  dev        - Start development environment"\n'
    '\t@echo "  test       - Run tests"\n'
    '\t@echo "  lint       - Run linters"\n'
    '\t@echo "  format     - Auto-format code"\n'
    '\t@echo "  docs       - Generate documentation"\n'
    '\t@echo "  clean      - Clean build artifacts"\n'
    "\n"
    "install:\n"
    "\tjulia --project -e 'import Pkg; Pkg.instantiate()'\n"
    "\n"
    "dev: install\n"
    "\t@echo \"Development environment ready. Use 'julia --project' to start.\"\n"
    "\n"
    "test:\n"
    "\tjulia --project test/runtests.jl\n"
    "\n"
    "lint:\n"
    "\tjulia --project -e 'using JuliaFormatter; format(\".\", verbose=true)'\n"
    '\t@echo "Linting complete."\n'
    "\n"
    "format:\n"
    "\tjulia --project -e 'using JuliaFormatter; format(\".\", verbose=true)'\n"
    "\n"
    "docs:\n"
    "\tjulia --project docs/make.jl\n"
    "\n"
    "clean:\n"
    "\trm -rf docs/build\n"
    "\trm -rf Manifest.toml\n"
)

MANIFEST_TEMPLATE = """name = "{{ name|toml }}"
uuid = "{{ uuid }}"
authors = ["{{ authors|toml }}"]
version = "{{ package_version }}"

[compat]
julia = "{{ runtime_version|toml }}"

[deps]
Documenter = "e30172f5-a6a5-5a46-863b-614d45cd2de4"
JuliaFormatter = "98e50ef6-434e-11e9-1051-2b60c6c9e899"
Test = "8dfed614-e22c-5e08-85e1-65c5234f0b40"

[extras]
Test = "8dfed614-e22c-5e08-85e1-65c5234f0b40"

[targets]
test = ["Test"]
"""

MODULE_TEMPLATE = '''module {{ name }}

export hello, fib

"""
    hello()

Return the string "Hello, World!".
"""
hello() = "Hello, World!"

"""
    fib(n::Integer)

Compute the nth Fibonacci number, with `fib(0) == 0` and `fib(1) == 1`.
"""
function fib(n::Integer)
    n <= 1 && return n
    a, b = 0, 1
    for _ in 2:n
        a, b = b, a + b
    end
    return b
end

end # module {{ name }}
'''

TESTS_TEMPLATE = """using {{ name }}
using Test

@testset "{{ name }}.jl" begin
    @test hello() == "Hello, World!"

    @test fib(0) == 0
    @test fib(1) == 1
    @test fib(2) == 1
    @test fib(3) == 2
    @test fib(10) == 55

    @test_throws MethodError fib("not a number")
end
"""

DOCS_MAKE_TEMPLATE = """using Documenter
using {{ name }}

makedocs(
    sitename = "{{ name }}",
    format = Documenter.HTML(),
    modules = [{{ name }}],
    pages = [
        "Home" => "index.md",
        "API Reference" => "api.md",
    ]
)

deploydocs(
    repo = "github.com/username/{{ name }}.jl.git",
)
"""

DOCS_INDEX_TEMPLATE = """# {{ name }} Documentation

{{ summary }}

## Getting Started

```julia
import Pkg
Pkg.add("{{ name }}")
using {{ name }}
```

## Examples

```julia
hello()  # returns "Hello, World!"
fib(10)  # returns 55
```
"""

DOCS_API_TEMPLATE = """# API Reference

```@docs
hello
fib
```
"""

GITIGNORE_TEMPLATE = """# Julia
*.jl.cov
*.jl.*.cov
*.jl.mem
*.jl~*
Manifest.toml
.julia_history
.julia_environments/

# Documenter.jl
docs/build/
docs/site/

# Coverage
coverage/
lcov.info

# Editors and OS
.DS_Store
.vscode/
.idea/
*.iml
*.sublime-*
*.code-workspace
*.swp
*.orig
*.bak
*.tmp

# Build output
build/
dist/
*.tar.gz
*.zip
*.log

# Local environment
.env
*.local
"""

CI_TEMPLATE = """name: CI

on:
  push:
    branches: [ main ]
  pull_request:
    branches: [ main ]

jobs:
  test:
    runs-on: ubuntu-latest
    strategy:
      matrix:
        julia-version: [{{ julia_matrix }}]

    steps:
      - uses: actions/checkout@v4
      - uses: julia-actions/setup-julia@v2
        with:
          version: ${{ matrix.julia-version }}
      - name: Install dependencies
        run: |
          julia --project -e 'import Pkg; Pkg.instantiate()'
      - name: Run lint
        run: |
          julia --project -e 'using JuliaFormatter; format(".", verbose=true)'
      - name: Run tests
        run: |
          julia --project test/runtests.jl
      - name: Build documentation
        run: |
          julia --project docs/make.jl

  docs:
    runs-on: ubuntu-latest
    needs: test
    if: github.event_name == 'push' && github.ref == 'refs/heads/main'
    steps:
      - uses: actions/checkout@v4
      - uses: julia-actions/setup-julia@v2
        with:
          version: {{ runtime_version|yaml }}
      - name: Install dependencies
        run: |
          julia --project -e 'import Pkg; Pkg.instantiate()'
      - name: Build and deploy documentation
        run: |
          julia --project docs/make.jl
        env:
          GITHUB_TOKEN: ${{ secrets.GITHUB_TOKEN }}
"""

JENKINS_TEMPLATE = """pipeline {
    agent any

    tools {
        julia 'julia-latest'
    }

    environment {
        JULIA_PROJECT = '.'
    }

    stages {
        stage('Checkout') {
            steps {
                checkout scm
            }
        }

        stage('Install Dependencies') {
            steps {
                sh 'julia --project -e "import Pkg; Pkg.instantiate()"'
            }
        }

        stage('Lint') {
            steps {
                sh 'julia --project -e "using JuliaFormatter; format(\\".\\", verbose=true)"'
            }
        }

        stage('Test') {
            steps {
                sh 'julia --project test/runtests.jl'
            }
        }

        stage('Build Docs') {
            steps {
                sh 'julia --project docs/make.jl'
            }
        }

        stage('Package') {
            when {
                branch 'main'
            }
            steps {
                sh 'tar -czf {{ name }}.tar.gz src test docs README.md LICENSE Project.toml'
                archiveArtifacts artifacts: '{{ name }}.tar.gz'
            }
        }
    }

    post {
        always {
            cleanWs()
        }
        success {
            echo 'Pipeline succeeded!'
        }
        failure {
            echo 'Pipeline failed!'
        }
    }
}
"""


@dataclass(frozen=True, slots=True)
class Template:
    """A file to generate: identifier, relative path pattern and content pattern."""

    identifier: str
    path: str
    content: str


TEMPLATES: tuple[Template, ...] = (
    Template("readme", "README.md", README_TEMPLATE),
    Template("agents", "AGENTS.md", AGENTS_TEMPLATE),
    Template("license", "LICENSE", LICENSE_TEMPLATE),
    Template("makefile", "Makefile", MAKEFILE_TEMPLATE),
    Template("manifest", "Project.toml", MANIFEST_TEMPLATE),
    Template("module", "src/{{ name }}.jl", MODULE_TEMPLATE),
    Template("tests", "test/runtests.jl", TESTS_TEMPLATE),
    Template("docs_make", "docs/make.jl", DOCS_MAKE_TEMPLATE),
    Template("docs_index", "docs/src/index.md", DOCS_INDEX_TEMPLATE),
    Template("docs_api", "docs/src/api.md", DOCS_API_TEMPLATE),
    Template("gitignore", ".gitignore", GITIGNORE_TEMPLATE),
    Template("ci", ".github/workflows/ci.yml", CI_TEMPLATE),
    Template("jenkins", "Jenkinsfile", JENKINS_TEMPLATE),
)

_TEMPLATES_BY_ID: dict[str, Template] = {template.identifier: template for template in TEMPLATES}


def get_template(template_id: str) -> Template:
    """Return the template registered as ``template_id``.

    Raises :class:`KeyError` for unknown identifiers.
    """

    try:
        return _TEMPLATES_BY_ID[template_id]
    except KeyError:
        raise KeyError(f"unknown template '{template_id}'") from None


def _julia_matrix(runtime_version: str) -> str:
    versions = [runtime_version]
    if runtime_version != "1":
        versions.append("1")
    return ", ".join(yaml_scalar(version) for version in versions)


def template_context(config: ProjectConfig) -> Mapping[str, str]:
    """Return the placeholder values shared by every template."""

    context = dict(config.context())
    context["julia_matrix"] = _julia_matrix(config.runtime_version)
    return context


def render_template(
    config: ProjectConfig,
    template_id: str,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Render the content of ``template_id`` for ``config``."""

    template = get_template(template_id)
    renderer = renderer or TemplateRenderer()
    return renderer.render_string(template.content, template_context(config), missing="error")


def render_path(
    config: ProjectConfig,
    template_id: str,
    renderer: TemplateRenderer | None = None,
) -> str:
    """Render the relative destination path of ``template_id`` for ``config``."""

    template = get_template(template_id)
    renderer = renderer or TemplateRenderer()
    return renderer.render_string(template.path, template_context(config), missing="error")

"""
Shared pytest fixtures and configuration for template-sync tests.

Nobody wants a test suite that needs network access and a real git server,
so cloning is faked by writing the template files straight into .template.
"""

import json
import os
import shutil
import subprocess
import tempfile

import pytest


@pytest.fixture
def temp_dir():
    """Create a temporary directory that's automatically cleaned up."""
    temp_dir = tempfile.mkdtemp()
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


def write_file(path, content):
    """Write text or a JSON-serializable dict to path, creating parents."""
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        if isinstance(content, dict):
            json.dump(content, f, indent=2)
        else:
            f.write(content)


def read_json(path):
    with open(path, 'r', encoding='utf-8') as f:
        return json.load(f)


class FakeGit:
    """
    Stands in for subprocess.run when the engine clones the template.

    Each clone writes template_files into the requested directory and
    records the command line.
    """

    def __init__(self, template_files=None, returncode=0, stderr=''):
        self.template_files = template_files or {}
        self.returncode = returncode
        self.stderr = stderr
        self.calls = []

    def __call__(self, args, check=False, **kwargs):
        self.calls.append(args)
        if self.returncode != 0:
            if check:
                raise subprocess.CalledProcessError(self.returncode, args, stderr=self.stderr)
            return subprocess.CompletedProcess(args, self.returncode, '', self.stderr)

        parent = args[args.index('-C') + 1]
        destination = os.path.join(parent, args[-1])
        os.makedirs(destination)
        for name, content in self.template_files.items():
            write_file(os.path.join(destination, name), content)
        return subprocess.CompletedProcess(args, 0, '', '')


@pytest.fixture
def fake_git():
    """Factory for FakeGit runners."""
    return FakeGit


@pytest.fixture
def project_factory(temp_dir):
    """Factory creating a project directory from a mapping of files."""
    def _create_project(files, name='project'):
        root = os.path.join(temp_dir, name)
        os.makedirs(root, exist_ok=True)
        for file_name, content in files.items():
            write_file(os.path.join(root, file_name), content)
        return root
    return _create_project


@pytest.fixture
def package_json_project(project_factory):
    """Project with a package.json whose version is kept out of the merge."""
    return project_factory({
        'template.json': {
            'source': 'repo-url',
            'json': [{'name': 'pkg.json', 'ignoreKeys': ['version']}]
        },
        'pkg.json': {'version': '1.0.0', 'name': 'app'},
    })


@pytest.fixture
def package_json_template():
    """Template side of package_json_project."""
    return {
        'pkg.json': {'version': '0.9.0', 'name': 'template-app', 'license': 'MIT'},
    }

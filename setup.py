import os
import setuptools

project_root = os.path.dirname(os.path.abspath(__file__))


def read(*parts):
    with open(os.path.join(project_root, *parts)) as f:
        return f.read().strip()


setuptools.setup(
    name='copyglob',
    description='Copy files matching a glob into a build output directory',
    version=read('copyglob', 'VERSION'),
    license='MIT',
    packages=['copyglob'],
    package_data={'copyglob': ['VERSION']},
    python_requires='>=3.6',
    install_requires=[],
    extras_require={'test': ['flake8', 'coverage']},
    long_description=read('README.md'),
    long_description_content_type='text/markdown',
)

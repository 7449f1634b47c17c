# coding: utf-8
# Copyright 2026 The glyphsheet Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
import os
from setuptools import setup

def glyphsheet_scripts():
    return [os.path.join('bin', 'glyphsheet')]

def glyphsheet_version():
    about = {}
    with open(os.path.join('Lib', 'glyphsheet', '_version.py')) as f:
        exec(f.read(), about)
    return about['version']

# Read the contents of the README file
with open('README.md') as f:
    long_description = f.read()

setup(
    name="glyphsheet",
    version=glyphsheet_version(),
    description='Render a PDF reference sheet of every character in a font',
    long_description=long_description,
    long_description_content_type='text/markdown',
    author='The glyphsheet Authors',
    package_dir={'': 'Lib'},
    packages=['glyphsheet',
              'glyphsheet.scripts'],
    scripts=glyphsheet_scripts(),
    zip_safe=False,
    classifiers=[
        'Environment :: Console',
        'Intended Audience :: Developers',
        'Topic :: Text Processing :: Fonts',
        'License :: OSI Approved :: Apache Software License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3'
    ],
    python_requires=">=3.8",
    extras_require={"test": ['pytest']},
    install_requires=[
        'FontTools',
        'reportlab',
        'rich',
        'PyYAML',
    ]
    )

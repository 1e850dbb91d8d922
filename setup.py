import os
import sys

from setuptools import setup, find_packages

if sys.version_info < (3, 9, 0):
    sys.exit('Python 3.9.0 is the minimum required version')

PROJECT_ROOT = os.path.dirname(__file__)

about = {}
with open(os.path.join(PROJECT_ROOT, 'src', 'tasklist', '__about__.py')) as file_:
    exec(file_.read(), about)

with open(os.path.join(PROJECT_ROOT, 'README.rst')) as file_:
    long_description = file_.read()

INSTALL_REQUIRES = [
    'click',
    'httpx',
    'hypercorn',
    'pydantic >= 2',
    'python-dotenv',
    'quart >= 0.19',
    'quart-schema[pydantic] >= 0.20',
    'werkzeug',
]

TESTS_REQUIRE = [
    'hypothesis',
    'pytest',
    'pytest-asyncio',
]

setup(
    name='Tasklist',
    version=about['__version__'],
    python_requires='>=3.9.0',
    description="An in-memory task store service with a server-rendered console",
    long_description=long_description,
    long_description_content_type='text/x-rst',
    license='MIT',
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Web Environment',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Internet :: WWW/HTTP :: Dynamic Content',
    ],
    package_dir={'': 'src'},
    packages=find_packages('src'),
    package_data={'tasklist.console': ['templates/*.html']},
    install_requires=INSTALL_REQUIRES,
    extras_require={
        'tests': TESTS_REQUIRE,
    },
    entry_points={
        'console_scripts': ['tasklist=tasklist.cli:main'],
    },
    include_package_data=True,
)

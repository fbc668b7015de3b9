# coding=utf-8

from setuptools import find_packages, setup

with open("README.md", "r") as fp:
    long_description = fp.read()

packages = find_packages("src")

setup(
    name="xff",
    version="1.0.0",
    description="Trusted-proxy aware X-Forwarded-For client address resolution",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",
    zip_safe=False,
    python_requires=">=3.8, <4",
    packages=packages,
    package_dir={str(""): str("src")},
    install_requires=[
        "asgiref",
        "wrapt>=1.10",
    ],
    extras_require={
        "test": [
            "pytest",
            "starlette",
            "webtest",
        ],
    },
    keywords=["x-forwarded-for", "proxy", "wsgi", "asgi", "security"],
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Topic :: Internet :: WWW/HTTP :: WSGI :: Middleware",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
)

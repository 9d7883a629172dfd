from setuptools import setup, find_packages

setup(
    name="selenium-waiter",
    version="1.0.0",
    description="Named explicit waits for Selenium WebDriver: page load, element visibility, URL matching",
    author="Michael Elliott",
    author_email="melliott@anaconda.com",
    url="https://github.com/melliott-anaconda/selenium-waiter",
    packages=find_packages(exclude=["tests", "tests.*"]),
    include_package_data=True,
    install_requires=[
        "selenium>=4.1.0",
        "webdriver-manager>=3.5.2",
        "selenium-stealth>=1.0.6",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        'console_scripts': [
            'waiter=waiter.__main__:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
)

import setuptools

setuptools.setup(
    name="scryfall_catalog",
    version="0.1",
    author="yochi",
    author_email="pedrogush@gmail.com",
    description="Scryfall card catalog browser: searchable, sortable card grid with card details",
    packages=["models", "repositories", "services", "controllers", "utils", "widgets"],
    py_modules=["main"],
    classifiers=["Programming Language :: Python :: 3", "Operating System :: OS Independent"],
    python_requires=">=3.11",
    install_requires=[
        "wxPython",
        "loguru",
        "requests",  # Image downloads from the Scryfall CDN
        "pillow",  # Validates downloaded image bytes
    ],
    extras_require={"test": ["pytest"]},
)

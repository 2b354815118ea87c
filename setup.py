from setuptools import setup, find_packages

setup(
    name="gestion-commande-store",
    version="0.1.0",
    packages=find_packages(include=["gestioncommande", "gestioncommande.*"]),
    python_requires=">=3.9",
    install_requires=[
        "sqlalchemy>=2.0",
        "psycopg2-binary",
        "pydantic>=2.0",
        "pydantic-settings",
        "python-dotenv",
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-cov",
        ],
    },
)

from setuptools import setup, find_packages

setup(
    name="contact-relay",
    version="0.1.0",
    description="Contact form backend relaying messages through Resend, SendGrid, Gmail or SMTP",
    author="",
    author_email="",
    packages=find_packages(where="src"),
    package_dir={"": "src"},
    python_requires=">=3.8",
    install_requires=[
        "Flask>=2.2.0",
        "Flask-Cors>=3.0.10",
        "MarkupSafe>=2.1.0",
        "sendgrid>=6.9.0",
        "requests>=2.28.0",
        "python-dotenv>=0.19.0",
        "click>=8.0.0",
        "pydantic>=2.5.0",
        "pydantic-core>=2.14.0",
        "pydantic-settings>=2.0.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "contact-relay=contact_relay.cli:main",
        ],
    },
)

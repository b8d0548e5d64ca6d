"""UI test automation framework for the DemoQA practice site."""

__version__ = "1.0.0"

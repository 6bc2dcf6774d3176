"""Dataset loading package"""
from .error_output import DatasetErrorOutput
from .input import DatasetInput, DatasetLoadError
from .loader import load_dataset

__all__ = ['DatasetErrorOutput', 'DatasetInput', 'DatasetLoadError', 'load_dataset']

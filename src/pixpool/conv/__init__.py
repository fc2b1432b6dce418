from pixpool.conv.abstract import Kernel
from pixpool.conv.convolution import ConvolutionKernel, convolve
from pixpool.conv.params import (
    ConvolutionParameters,
    KernelParameters,
    ResizeParameters,
    RotationParameters,
    SobelParameters,
)
from pixpool.conv.resize import ResizeKernel, resize
from pixpool.conv.rotation import RotationKernel, rotate
from pixpool.conv.sobel import SobelKernel, detect_edges

__all__ = [
    "ConvolutionKernel",
    "ConvolutionParameters",
    "Kernel",
    "KernelParameters",
    "ResizeKernel",
    "ResizeParameters",
    "RotationKernel",
    "RotationParameters",
    "SobelKernel",
    "SobelParameters",
    "convolve",
    "detect_edges",
    "resize",
    "rotate",
]

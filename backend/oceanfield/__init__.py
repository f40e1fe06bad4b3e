"""
OceanField：程序化 Gerstner 海面位移与泡沫/破碎分类。
"""

__version__ = "0.1.0"

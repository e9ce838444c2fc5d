# cube_config.py
import os

from omegaconf import OmegaConf

DEFAULT_CONFIG = {
    'scramble': {'steps': 100, 'seed': None},
    'play': {
        'bindings': {
            '1': 'X0', '2': 'X1', '3': 'X2',
            '4': 'Y0', '5': 'Y1', '6': 'Y2',
            '7': 'Z0', '8': 'Z1', '9': 'Z2',
        },
    },
    'dataset': {
        'data_dir': 'rubik_shards',
        'num_samples': 1000,
        'min_scramble': 3,
        'max_scramble': 25,
        'history_len': 8,
    },
}


def load_config(path="config.yaml"):
    """读取配置文件并合并到默认配置上；文件不存在时只用默认值。"""
    config = OmegaConf.create(DEFAULT_CONFIG)
    if path is not None and os.path.exists(path):
        config = OmegaConf.merge(config, OmegaConf.load(path))
    return config

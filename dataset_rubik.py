# dataset_rubik.py
import os
import pickle
import random

import torch
from omegaconf import OmegaConf
from torch.nn.utils.rnn import pad_sequence
from torch.utils.data import Dataset
from tqdm import tqdm

from cube_config import load_config
from cube_rotate import new_solved_cube
from utils import (
    EOS_TOKEN,
    MASK_OR_NOMOVE_TOKEN,
    MOVES_POOL,
    PAD_TOKEN,
    SOS_TOKEN,
    apply_moves,
    convert_state_to_tensor,
    cube_to_6x9,
    move_str_to_idx,
)


def inverse_move(move_str):
    """
    每层只有一个转动方向，所以某个动作的逆操作就是同一动作连做三次。
    返回动作字符串列表。
    """
    return [move_str] * 3


def generate_scramble_and_solution(min_scramble=3, max_scramble=25, rng=None):
    """随机打乱 + 逆操作得到还原序列。"""
    rng = rng or random
    k = rng.randint(min_scramble, max_scramble)
    scramble_moves = [rng.choice(MOVES_POOL) for _ in range(k)]
    # 逆序还原
    solution_moves = [m for mv in reversed(scramble_moves) for m in inverse_move(mv)]
    return scramble_moves, solution_moves


def generate_single_case(min_scramble=3, max_scramble=25, rng=None):
    """
    生成一条数据: steps = [ (6x9二维数组, move), ... ]
    steps[0] 为打乱态 (move=None)
    后续 steps[i] 为执行第i步操作后的状态，最后一步一定是复原态
    """
    scramble_ops, solution_ops = generate_scramble_and_solution(min_scramble, max_scramble, rng)
    cube = apply_moves(new_solved_cube(), scramble_ops)

    steps = [(cube_to_6x9(cube), None)]
    for mv in solution_ops:
        apply_moves(cube, [mv])
        steps.append((cube_to_6x9(cube), mv))
    return {'steps': steps}


def encode_move(mv):
    if mv is None:
        return MASK_OR_NOMOVE_TOKEN
    return move_str_to_idx(mv)


def build_sample(steps, t, history_len):
    """
    由 steps 的第 t 步构造一个训练样本：
      - src: (history_len+1, 55)，前 54 维为状态，最后 1 维为对应 move 索引，
             不足 history_len 的历史用 PAD_TOKEN 左侧填充
      - tgt: [SOS, move[t+1], ..., move[-1], EOS]
    """
    seq_len = history_len + 1
    src_seq = torch.full((seq_len, 55), PAD_TOKEN, dtype=torch.long)

    start_idx = max(0, t - history_len)
    used_steps = steps[start_idx: t + 1]
    offset = seq_len - len(used_steps)

    for i, (s6x9_i, mv_i) in enumerate(used_steps):
        src_seq[offset + i, :54] = convert_state_to_tensor(s6x9_i)
        src_seq[offset + i, 54] = encode_move(mv_i)

    tgt_list = [SOS_TOKEN]
    for _, mv in steps[t + 1:]:
        tgt_list.append(encode_move(mv))
    tgt_list.append(EOS_TOKEN)
    tgt_seq = torch.tensor(tgt_list, dtype=torch.long)

    return src_seq, tgt_seq


class RubikDataset(Dataset):
    def __init__(self, data_dir=None, history_len=8, max_files=None,
                 num_samples=0,
                 min_scramble=3,
                 max_scramble=25,
                 seed=None):
        super().__init__()
        self.history_len = history_len
        self.samples = []

        if data_dir is not None:
            pkl_files = sorted(f for f in os.listdir(data_dir) if f.endswith('.pkl'))
            if max_files is not None:
                pkl_files = pkl_files[:max_files]
            for pf in pkl_files:
                self._load_from_file(os.path.join(data_dir, pf))
        else:
            self._generate_in_memory(num_samples, min_scramble, max_scramble, random.Random(seed))

    def _add_case(self, item):
        steps = item['steps']
        for t in range(len(steps)):
            self.samples.append(build_sample(steps, t, self.history_len))

    def _generate_in_memory(self, num_samples, min_scramble, max_scramble, rng):
        print(f"RubikDataset: 正在内存中生成 {num_samples} 条数据...")
        for _ in tqdm(range(num_samples), desc="Generating", disable=num_samples == 0):
            self._add_case(generate_single_case(min_scramble, max_scramble, rng))
        print(f"RubikDataset: 内存生成完毕，共生成 {len(self.samples)} 条样本.")

    def _load_from_file(self, file_path):
        with open(file_path, 'rb') as f:
            while True:
                try:
                    data_list = pickle.load(f)
                except EOFError:
                    break
                for item in data_list:
                    self._add_case(item)

    def __len__(self):
        return len(self.samples)

    def __getitem__(self, idx):
        return self.samples[idx]


def collate_fn(batch):
    """
    batch: list of (src_seq, tgt_seq)
      - src_seq.shape = (history_len+1, 55)
      - tgt_seq: 1D tensor of token indices, 长度可能不同
    """
    src_tensor = torch.stack([x[0] for x in batch], dim=0)
    tgt_tensor = pad_sequence([x[1] for x in batch], batch_first=True, padding_value=PAD_TOKEN)
    return src_tensor, tgt_tensor


def generate_rubik_data(n=1, filename=None, min_scramble=3, max_scramble=25, seed=None):
    """生成 n 条打乱-还原数据；给定 filename 时追加写入 pickle 文件。"""
    rng = random.Random(seed)
    data = [generate_single_case(min_scramble, max_scramble, rng)
            for _ in tqdm(range(n), desc="Generating")]
    if filename is not None:
        with open(filename, 'ab') as f:
            pickle.dump(data, f)
        print(f"已保存 {len(data)} 条数据到 {filename}")
    return data


if __name__ == "__main__":
    config = load_config("config.yaml")
    print(OmegaConf.to_yaml(config.dataset))
    ds_cfg = config.dataset
    os.makedirs(ds_cfg.data_dir, exist_ok=True)
    generate_rubik_data(
        n=ds_cfg.num_samples,
        filename=os.path.join(ds_cfg.data_dir, "rubik_data.pkl"),
        min_scramble=ds_cfg.min_scramble,
        max_scramble=ds_cfg.max_scramble,
        seed=config.scramble.seed,
    )

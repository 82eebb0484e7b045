"""Instruction implementations: arithmetic, flow, memory and system calls."""
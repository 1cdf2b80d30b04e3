"""LLVM IR generation for the word primitive."""

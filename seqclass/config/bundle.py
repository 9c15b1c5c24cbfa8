"""Bundle layout constants.

A bundle is a directory holding exactly these three files.
"""

CONFIG_FILENAME = "config.json"
TOKENIZER_FILENAME = "tokenizer.json"
WEIGHTS_FILENAME = "model.safetensors"

# Architecture assumed when config.json does not declare a model_type.
DEFAULT_MODEL_TYPE = "modernbert"

# Pooling used when the bundle's classifier_pooling is unrecognized.
FALLBACK_POOLING = "cls"

# Hyperparameters every encoder needs. pad_token_id also drives batch
# padding in the tokenizer.
REQUIRED_HYPERPARAMETERS: tuple[str, ...] = (
    "vocab_size",
    "hidden_size",
    "num_hidden_layers",
    "num_attention_heads",
    "intermediate_size",
    "max_position_embeddings",
    "layer_norm_eps",
    "pad_token_id",
)

# Extra hyperparameters keyed by model_type. Types not listed here only
# need the common set.
ARCHITECTURE_HYPERPARAMETERS: dict[str, tuple[str, ...]] = {
    "modernbert": (
        "global_attn_every_n_layers",
        "global_rope_theta",
        "local_attention",
        "local_rope_theta",
    ),
}


__all__ = [
    "CONFIG_FILENAME",
    "TOKENIZER_FILENAME",
    "WEIGHTS_FILENAME",
    "DEFAULT_MODEL_TYPE",
    "FALLBACK_POOLING",
    "REQUIRED_HYPERPARAMETERS",
    "ARCHITECTURE_HYPERPARAMETERS",
]

"""
Training configuration for the bubble shooter environment
"""

# Environment parameters
ENV_CONFIG = {
    # "render_mode": None,  # Don't render during training
    "game_config": {
        "game_time": 60,
        "fps": 60,  # 3600 steps per episode
    },
    "k_bubbles": 5,
}

# ==============================================================================
# REWARD SHAPING CONFIGURATIONS
# ==============================================================================

# Baseline: points only, light shot cost
REWARD_CONFIG_BASELINE = {
    "name": "baseline",
    "description": "Reward popped bubbles, small cost per shot and per escape",
    "R_POP": 1.0,        # Reward per bubble destroyed
    "R_SHOT": 0.01,      # Penalty per bullet fired
    "R_ESCAPE": 0.1,     # Penalty per bubble that reaches the bottom
}

# Sniper: expensive shots, encourages aiming
REWARD_CONFIG_SNIPER = {
    "name": "sniper",
    "description": "Expensive shots - only fire when a bubble is lined up",
    "R_POP": 1.0,
    "R_SHOT": 0.1,
    "R_ESCAPE": 0.1,
}

REWARD_CONFIGS = {
    "baseline": REWARD_CONFIG_BASELINE,
    "sniper": REWARD_CONFIG_SNIPER,
}

# ==============================================================================
# ALGORITHM HYPERPARAMETERS
# ==============================================================================

# PPO hyperparameters
PPO_CONFIG = {
    "policy": "MlpPolicy",
    "learning_rate": 3e-4,
    "n_steps": 2048,
    "batch_size": 256,
    "n_epochs": 10,
    "gamma": 0.99,
    "gae_lambda": 0.95,
    "clip_range": 0.2,
    "ent_coef": 0.01,
    "vf_coef": 0.5,
    "max_grad_norm": 0.5,
    "verbose": 1,
}

# DQN hyperparameters
DQN_CONFIG = {
    "policy": "MlpPolicy",
    "learning_rate": 1e-4,
    "buffer_size": 100_000,
    "learning_starts": 1000,
    "batch_size": 128,
    "tau": 1.0,
    "gamma": 0.99,
    "train_freq": 4,
    "gradient_steps": 1,
    "target_update_interval": 1000,
    "exploration_fraction": 0.1,
    "exploration_initial_eps": 1.0,
    "exploration_final_eps": 0.05,
    "verbose": 1,
}

# ==============================================================================
# TRAINING SETTINGS
# ==============================================================================

TRAINING_CONFIG = {
    "total_timesteps": 500_000,
    "save_freq": 10_000,
    "eval_freq": 5_000,
    "log_dir": "./logs",
    "model_dir": "./models",
    "tensorboard_log": "./tensorboard_logs",
}

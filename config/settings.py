from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Solana RPC
    main_rpc_url: str = "https://api.devnet.solana.com"
    rpc_timeout_sec: float = 15.0

    # Donation endpoint shared secret (empty = every request is rejected)
    auth_token: str = ""

    # Token transfer — fixed test token on the Token-2022 program
    token_mint_address: str = "6uDhUuiNQvstbb2mgNvFvNsQJZ1XWFQCiDTKGuxozFeo"
    token_program_id: str = "TokenzQdBNbLqP5VEhdkAS6EPFLC1PHnBqCXEpPxuEb"
    token_decimals: int = 9

    # SOL donation destination
    donation_address: str = "AUNVJ3h4RJ4iGcCGnJYzkXoqttgSjRrk7w71ziSDvB6h"

    # Simulation policy per handler
    simulate_token_transfers: bool = True
    simulate_donations: bool = False

    # Logging
    log_level: str = "INFO"
    json_logs: bool = False

    # Local dev server
    dev_server_port: int = 8080


settings = Settings()

#!/usr/bin/env python3
"""
A script boilerplate following Python best practices.

This template includes configuration management, virtual environment setup,
dependency management, and other best practices.
"""

import argparse
import configparser
import json
import logging
import os
import subprocess
import sys
from pathlib import Path
from typing import Dict, Any, Optional, Union


def setup_logging(log_level: str = "INFO") -> None:
    """Set up logging configuration."""
    numeric_level = getattr(logging, log_level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {log_level}")
    
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load configuration from a file.
    Supports .ini, .json, and .env file formats.
    """
    config_path = Path(config_path)
    
    if not config_path.exists():
        logging.error(f"Configuration file not found: {config_path}")
        sys.exit(1)
    
    # Determine file type and load accordingly
    if config_path.suffix == '.ini':
        config = configparser.ConfigParser()
        config.read(config_path)
        # Convert to dict for consistency
        return {s: dict(config.items(s)) for s in config.sections()}
    
    elif config_path.suffix == '.json':
        with open(config_path, 'r') as f:
            return json.load(f)
    
    elif config_path.suffix == '.env':
        # Simple .env parser
        result = {}
        with open(config_path, 'r') as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith('#'):
                    continue
                key, value = line.split('=', 1)
                result[key.strip()] = value.strip().strip('"\'')
        return result
    
    else:
        logging.error(f"Unsupported configuration file format: {config_path.suffix}")
        sys.exit(1)


def ensure_venv() -> None:
    """
    Ensure we're running in a virtual environment.
    If not, create one and relaunch the script within it.
    """
    # Check if we're already in a virtual environment
    if sys.prefix == sys.base_prefix:
        script_dir = Path(__file__).parent.absolute()
        venv_dir = script_dir / "venv"
        
        # Create a virtual environment if it doesn't exist
        if not venv_dir.exists():
            logging.info("Creating virtual environment...")
            subprocess.run([sys.executable, "-m", "venv", str(venv_dir)], check=True)
        
        # Determine the path to the Python interpreter in the virtual environment
        if sys.platform == "win32":
            python_path = venv_dir / "Scripts" / "python.exe"
        else:
            python_path = venv_dir / "bin" / "python"
        
        # Install dependencies
        requirements_path = script_dir / "requirements.txt"
        if requirements_path.exists():
            logging.info("Installing dependencies...")
            subprocess.run(
                [str(python_path), "-m", "pip", "install", "-r", str(requirements_path)],
                check=True
            )
        
        # Re-run the script with the same arguments but using the virtual environment's Python
        logging.info("Relaunching script in virtual environment...")
        os.execv(str(python_path), [str(python_path)] + sys.argv)


def parse_arguments() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description=__doc__)
    
    parser.add_argument(
        "--config", 
        type=str, 
        default="config.json",
        help="Path to the configuration file (default: config.json)"
    )
    
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="INFO",
        help="Set the logging level (default: INFO)"
    )
    
    parser.add_argument(
        "--skip-venv",
        action="store_true",
        help="Skip virtual environment check and setup"
    )
    
    # Add your custom arguments here
    
    return parser.parse_args()


def main() -> int:
    """Main function."""
    args = parse_arguments()
    
    # Set up logging
    setup_logging(args.log_level)
    
    # Ensure we're in a virtual environment (unless skipped)
    if not args.skip_venv:
        ensure_venv()
    
    # Load configuration
    try:
        config = load_config(args.config)
        logging.debug(f"Loaded configuration: {config}")
    except Exception as e:
        logging.error(f"Failed to load configuration: {e}")
        return 1
    
    # Your application logic here
    logging.info("Starting application...")
    
    # Example: Access configuration values
    # app_name = config.get('app', {}).get('name', 'Default App Name')
    
    logging.info("Application completed successfully")
    return 0


if __name__ == "__main__":
    sys.exit(main())

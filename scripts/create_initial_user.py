"""Utility script to create the first administrator of the platform."""

from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from app.application.use_cases.users import create_user
from app.domain.entities import ROLE_ADMIN
from app.infrastructure.database import SessionLocal, initialize_database
from app.infrastructure.security import create_access_token


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for user creation."""

    parser = argparse.ArgumentParser(
        description="Create an initial administrator for the MedLog API.",
    )
    parser.add_argument(
        "--email",
        default="admin@example.com",
        help="Correo electrónico del administrador (por defecto: admin@example.com)",
    )
    parser.add_argument(
        "--full-name",
        default="Administrador",
        help="Nombre mostrado en las notificaciones (por defecto: Administrador)",
    )
    parser.add_argument(
        "--print-token",
        action="store_true",
        help="Imprime un token de acceso de prueba para el usuario creado.",
    )
    return parser.parse_args()


def main() -> None:
    """Create an administrator using the provided command line arguments."""

    args = parse_args()
    initialize_database()

    session = SessionLocal()
    try:
        user = create_user(
            session,
            email=args.email,
            role_alias=ROLE_ADMIN,
            profile_data={"full_name": args.full_name},
        )
    except ValueError as exc:
        session.rollback()
        raise SystemExit(f"No se pudo crear el usuario: {exc}") from exc
    except SQLAlchemyError as exc:
        session.rollback()
        raise SystemExit(f"Error al guardar el usuario en la base de datos: {exc}") from exc
    else:
        print(
            "Administrador creado exitosamente:\n"
            f"  ID: {user.id}\n"
            f"  Email: {user.email}\n"
            f"  Nombre: {user.profile.display_name()}"
        )
        if args.print_token:
            print(f"  Token: {create_access_token(user.id)}")
    finally:
        session.close()


if __name__ == "__main__":
    main()

import os
import sys
import logging
import argparse

# Add the current directory to Python path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from configuration import DEFAULT_STORAGE_TYPE, STORAGE_TYPES

# Set up logging (only if not already configured)
if not logging.root.handlers:
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)


class BucketCLI:
    """Command line interface for bucket management."""

    def __init__(self, out=None):
        self.parser = self._create_parser()
        self.out = out if out is not None else sys.stdout

    def _create_parser(self):
        """Create the main argument parser."""
        parser = argparse.ArgumentParser(
            description='Bucket management CLI',
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # List every bucket on the endpoint configured by OSS_ENDPOINT
  python cli.py list

  # List R2 buckets whose name starts with "logs-"
  python cli.py list --storage r2 --prefix logs-

  # Create and delete a bucket on AWS S3
  python cli.py create my-bucket --storage s3 --location eu-north-1
  python cli.py delete my-bucket --storage s3

  # Check dependencies and credentials
  python cli.py verify --storage r2
            """
        )

        subparsers = parser.add_subparsers(dest='command', help='Available commands')

        # List command
        list_parser = subparsers.add_parser('list', help='List buckets')
        self._add_storage_argument(list_parser)
        list_parser.add_argument('--prefix', type=str, default=None,
                                 help='Only list buckets whose name starts with this prefix')

        # Create command
        create_parser = subparsers.add_parser('create', help='Create a bucket')
        self._add_storage_argument(create_parser)
        create_parser.add_argument('name', type=str, help='Bucket name')
        create_parser.add_argument('--location', type=str, default=None,
                                   help='Bucket location (default: storage system default)')

        # Delete command
        delete_parser = subparsers.add_parser('delete', help='Delete an empty bucket')
        self._add_storage_argument(delete_parser)
        delete_parser.add_argument('name', type=str, help='Bucket name')

        # Verify command
        verify_parser = subparsers.add_parser('verify', help='Verify setup and connection')
        self._add_storage_argument(verify_parser)

        return parser

    @staticmethod
    def _add_storage_argument(parser):
        parser.add_argument('--storage', choices=list(STORAGE_TYPES), default=DEFAULT_STORAGE_TYPE,
                            help=f'Storage type to use (default: {DEFAULT_STORAGE_TYPE})')

    def _create_client(self, storage_type):
        from common.storage_factory import create_client
        return create_client(storage_type)

    def run_list(self, args):
        """List buckets, one name per line."""
        try:
            client = self._create_client(args.storage)
            count = 0
            for bucket in client.list_buckets(prefix=args.prefix):
                print(bucket.name, file=self.out)
                count += 1
            logger.info(f"Listed {count} buckets")
            return 0

        except Exception as e:
            logger.error(f"Error listing buckets: {e}")
            return 1

    def run_create(self, args):
        """Create a bucket."""
        try:
            client = self._create_client(args.storage)
            client.create_bucket(args.name, location=args.location)
            return 0

        except Exception as e:
            logger.error(f"Error creating bucket {args.name}: {e}")
            return 1

    def run_delete(self, args):
        """Delete a bucket."""
        try:
            client = self._create_client(args.storage)
            client.delete_bucket(args.name)
            return 0

        except Exception as e:
            logger.error(f"Error deleting bucket {args.name}: {e}")
            return 1

    def run_verify(self, args):
        """Verify dependencies, then the connection."""
        try:
            from systems.base import verify_setup

            if not verify_setup():
                return 1
            client = self._create_client(args.storage)
            return 0 if client.storage_system.verify_connection() else 1

        except Exception as e:
            logger.error(f"Error verifying setup: {e}")
            return 1

    def run(self, args=None):
        """Run the CLI with the given arguments."""
        if args is None:
            args = sys.argv[1:]

        parsed_args = self.parser.parse_args(args)

        if not parsed_args.command:
            self.parser.print_help()
            return 1

        try:
            if parsed_args.command == 'list':
                return self.run_list(parsed_args)
            elif parsed_args.command == 'create':
                return self.run_create(parsed_args)
            elif parsed_args.command == 'delete':
                return self.run_delete(parsed_args)
            elif parsed_args.command == 'verify':
                return self.run_verify(parsed_args)
            else:
                logger.error(f"Unknown command: {parsed_args.command}")
                return 1

        except KeyboardInterrupt:
            logger.info("Operation interrupted by user")
            return 1


def main():
    """Main entry point."""
    cli = BucketCLI()
    sys.exit(cli.run())


if __name__ == '__main__':
    main()

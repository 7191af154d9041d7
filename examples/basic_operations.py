# Copyright 2025 Accelerated Cloud Storage Corporation. All Rights Reserved.
from s3_misc import S3Client
from s3_misc.client.exceptions import ServiceError
from s3_misc.client.render import string_value
from s3_misc.client.types import ListObjectsOptions
import os

def main():
    # Create a new client; credentials come from the usual boto3 chain
    client = S3Client()
    bucket = os.environ.get("S3_MISC_EXAMPLE_BUCKET", "your-example-bucket-name")

    try:
        # Upload an object
        data = b"Hello, World!"
        put = client.put_object(bucket, "examples/hello.txt", data)
        print(f"Uploaded object: examples/hello.txt ({put.etag})")

        # Get object metadata
        metadata = client.head_object(bucket, "examples/hello.txt")
        print(f"Object size: {metadata.content_length} bytes")
        print(f"Last modified: {metadata.last_modified}")

        # Copy it next to the original
        client.copy_object(bucket, f"{bucket}/examples/hello.txt", "examples/hello-copy.txt")
        print("Copied object: examples/hello-copy.txt")

        # List objects under the prefix
        listing = client.list_objects(bucket, ListObjectsOptions(prefix="examples/"))
        print("Objects in bucket:")
        for obj in listing.contents:
            print(f"- {obj.key} ({obj.size} bytes)")
        print(string_value(listing))

        # Delete both objects
        client.delete_object(bucket, "examples/hello-copy.txt")
        client.delete_object(bucket, "examples/hello.txt")
        print("Deleted objects")

    except ServiceError as e:
        print(f"Request failed: {e}")

    finally:
        client.close()

if __name__ == "__main__":
    main()

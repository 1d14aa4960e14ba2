"""Example demonstrating retry mechanism."""

import asyncio

from retried import BackoffStrategy, RetryOptions, retry, retrying


async def flaky_api_call(attempt_counter):
    """Simulates a flaky API that fails first 2 times."""
    attempt_counter[0] += 1
    print(f"  Attempt {attempt_counter[0]}...", end=" ")

    if attempt_counter[0] < 3:
        print("❌ Failed (simulated error)")
        raise ConnectionError("API temporarily unavailable")

    print("✅ Success!")
    return {"status": "ok", "data": "API response"}


@retrying({"retries": 4, "strategy": "fixed", "base_timeout": 100})
async def decorated_call(attempt_counter):
    return await flaky_api_call(attempt_counter)


async def main():
    print("🔄 Testing Retry Mechanism\n")

    # Example 1: Exponential backoff
    print("Example 1: Flaky API that succeeds on 3rd attempt")
    attempt_counter = [0]
    options = RetryOptions(
        retries=5,
        strategy=BackoffStrategy.EXPONENTIAL,
        base_timeout=500,
        on_retry=lambda e: print(f"  ↪ retrying after: {e}"),
    )

    result = await retry(lambda: flaky_api_call(attempt_counter), options)
    print(f"  Result: {result}\n")

    # Example 2: Decorator with fixed delay
    print("Example 2: Decorated call with fixed 100ms delay")
    attempt_counter2 = [0]
    result2 = await decorated_call(attempt_counter2)
    print(f"  Result: {result2}\n")

    # Example 3: Budget exhausted
    print("Example 3: Budget of 2 attempts runs out")
    attempt_counter3 = [0]
    try:
        await retry(lambda: flaky_api_call(attempt_counter3), {"retries": 2, "base_timeout": 100})
    except ConnectionError as e:
        print(f"  Gave up: {e}\n")

    print("✅ All retry examples completed successfully!")


if __name__ == "__main__":
    asyncio.run(main())

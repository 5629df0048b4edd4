"""A FIFO queue and a queue with separate sending and receiving ends."""